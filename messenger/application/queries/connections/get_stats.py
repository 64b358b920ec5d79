"""Get Stats Query - Connection and active-user counts."""

from dataclasses import dataclass
from typing import Any
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.ports.repositories import ConnectionRepository


@dataclass(frozen=True)
class GetStatsQuery(Query[dict[str, Any]]):
    pass


class GetStatsHandler(QueryHandler[dict[str, Any]]):
    def __init__(self, connections: ConnectionRepository):
        self._connections = connections

    def execute(self, query: GetStatsQuery) -> dict[str, Any]:
        return self._connections.stats()
