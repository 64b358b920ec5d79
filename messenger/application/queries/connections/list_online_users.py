"""List Online Users Query."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.ports.repositories import ConnectionRepository


@dataclass(frozen=True)
class ListOnlineUsersQuery(Query[list[str]]):
    pass


class ListOnlineUsersHandler(QueryHandler[list[str]]):
    def __init__(self, connections: ConnectionRepository):
        self._connections = connections

    def execute(self, query: ListOnlineUsersQuery) -> list[str]:
        return self._connections.online_users()
