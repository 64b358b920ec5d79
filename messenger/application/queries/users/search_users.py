"""Search Users Query - Case-insensitive match on username or full name."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.user import User
from messenger.domain.exceptions import DomainValidationError
from messenger.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class SearchUsersQuery(Query[list[User]]):
    query: str
    exclude_username: str = ""


class SearchUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    def execute(self, query: SearchUsersQuery) -> list[User]:
        if not query.query:
            raise DomainValidationError("Search query parameter 'q' is required")
        return self._user_repository.search(query.query, query.exclude_username)
