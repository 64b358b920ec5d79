"""User queries."""

from messenger.application.queries.users.get_profile import (
    GetProfileQuery,
    GetProfileHandler,
)
from messenger.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)
from messenger.application.queries.users.search_users import (
    SearchUsersQuery,
    SearchUsersHandler,
)

__all__ = [
    "GetProfileQuery",
    "GetProfileHandler",
    "ListUsersQuery",
    "ListUsersHandler",
    "SearchUsersQuery",
    "SearchUsersHandler",
]
