"""User DTOs for API responses."""

from __future__ import annotations
from pydantic import BaseModel

from messenger.domain.entities.user import User


class UserDTO(BaseModel):
    """Full profile."""

    username: str
    email: str
    full_name: str
    is_online: bool
    last_seen: int
    created_at: int

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            is_online=user.is_online,
            last_seen=user.last_seen,
            created_at=user.created_at,
        )


class UserSummaryDTO(BaseModel):
    """Entry of the user directory."""

    username: str
    full_name: str
    is_online: bool
    last_seen: int

    @classmethod
    def from_entity(cls, user: User) -> UserSummaryDTO:
        return cls(
            username=user.username,
            full_name=user.full_name,
            is_online=user.is_online,
            last_seen=user.last_seen,
        )


class UserSearchResultDTO(BaseModel):
    username: str
    full_name: str
    is_online: bool

    @classmethod
    def from_entity(cls, user: User) -> UserSearchResultDTO:
        return cls(
            username=user.username,
            full_name=user.full_name,
            is_online=user.is_online,
        )
