"""Get Profile Query."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.user import User
from messenger.domain.exceptions import EntityNotFoundError
from messenger.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class GetProfileQuery(Query[User]):
    username: str


class GetProfileHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    def execute(self, query: GetProfileQuery) -> User:
        user = self._user_repository.get(query.username)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user
