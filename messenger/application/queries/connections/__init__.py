"""Connection registry queries."""

from messenger.application.queries.connections.get_stats import (
    GetStatsQuery,
    GetStatsHandler,
)
from messenger.application.queries.connections.list_online_users import (
    ListOnlineUsersQuery,
    ListOnlineUsersHandler,
)

__all__ = [
    "GetStatsQuery",
    "GetStatsHandler",
    "ListOnlineUsersQuery",
    "ListOnlineUsersHandler",
]
