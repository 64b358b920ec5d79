"""List Users Query - Everyone except the caller."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.user import User
from messenger.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ListUsersQuery(Query[list[User]]):
    exclude_username: str = ""


class ListUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    def execute(self, query: ListUsersQuery) -> list[User]:
        return self._user_repository.list_all(query.exclude_username)
