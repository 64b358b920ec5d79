"""
Users API Router.

Routes (all require a bearer token):
  GET  /api/users/profile           → caller's profile
  PUT  /api/users/profile           {full_name?, email?} → updated profile
  GET  /api/users                   → everyone except the caller
  GET  /api/users/search?q=<text>   → matches on username / full name
  POST /api/users/status            {is_online}
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from messenger.application.commands.users import (
    SetOnlineStatusCommand,
    SetOnlineStatusHandler,
    UpdateProfileCommand,
    UpdateProfileHandler,
)
from messenger.application.dto.user import (
    UserDTO,
    UserSearchResultDTO,
    UserSummaryDTO,
)
from messenger.application.queries.users import (
    GetProfileHandler,
    GetProfileQuery,
    ListUsersHandler,
    ListUsersQuery,
    SearchUsersHandler,
    SearchUsersQuery,
)
from messenger.domain.exceptions import DomainValidationError, EntityNotFoundError
from messenger.presentation.dependencies.auth import AuthUser, get_current_user
from messenger.presentation.dependencies.providers import (
    get_list_users_handler,
    get_profile_handler,
    get_search_users_handler,
    get_set_online_status_handler,
    get_update_profile_handler,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class UpdateProfileRequest(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None


class UpdateProfileResponse(UserDTO):
    updated: bool = True


class ListUsersResponse(BaseModel):
    users: list[UserSummaryDTO]
    total: int


class SearchUsersResponse(BaseModel):
    results: list[UserSearchResultDTO]
    query: str
    total: int


class SetOnlineStatusRequest(BaseModel):
    is_online: bool


class SetOnlineStatusResponse(BaseModel):
    username: str
    is_online: bool
    updated: bool = True


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/users", tags=["users"])


# ==================== ENDPOINTS ====================


@router.get("/profile", response_model=UserDTO)
def get_profile(
    handler: GetProfileHandler = Depends(get_profile_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        user = handler.execute(GetProfileQuery(username=current_user.username))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    logger.info("Profile retrieved for user: %s", current_user.username)
    return UserDTO.from_entity(user)


@router.put("/profile", response_model=UpdateProfileResponse)
def update_profile(
    request: UpdateProfileRequest,
    handler: UpdateProfileHandler = Depends(get_update_profile_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        user = handler.execute(
            UpdateProfileCommand(
                username=current_user.username,
                full_name=request.full_name,
                email=request.email,
            )
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    logger.info("Profile updated for user: %s", current_user.username)
    return UpdateProfileResponse(**UserDTO.from_entity(user).model_dump())


@router.get("", response_model=ListUsersResponse)
def list_users(
    handler: ListUsersHandler = Depends(get_list_users_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    users = handler.execute(ListUsersQuery(exclude_username=current_user.username))
    logger.info("Users list retrieved for: %s", current_user.username)
    return ListUsersResponse(
        users=[UserSummaryDTO.from_entity(user) for user in users],
        total=len(users),
    )


@router.get("/search", response_model=SearchUsersResponse)
def search_users(
    q: str = "",
    handler: SearchUsersHandler = Depends(get_search_users_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        users = handler.execute(
            SearchUsersQuery(query=q, exclude_username=current_user.username)
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    logger.info("User search performed: %s (%d results)", q, len(users))
    return SearchUsersResponse(
        results=[UserSearchResultDTO.from_entity(user) for user in users],
        query=q,
        total=len(users),
    )


@router.post("/status", response_model=SetOnlineStatusResponse)
def set_online_status(
    request: SetOnlineStatusRequest,
    handler: SetOnlineStatusHandler = Depends(get_set_online_status_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        is_online = handler.execute(
            SetOnlineStatusCommand(
                username=current_user.username, is_online=request.is_online
            )
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return SetOnlineStatusResponse(username=current_user.username, is_online=is_online)
