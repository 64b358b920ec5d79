"""
Connection Registry API Router.

HTTP facade over the connection registry; there is no socket transport,
pushes go through the PushGateway. All routes require a bearer token.

Routes:
  GET         /api/websocket/stats
  GET         /api/websocket/online
  POST        /api/websocket/connect      ?user_id= | {user_id} | token user
  POST        /api/websocket/send         {to_user, message}
  POST        /api/websocket/broadcast    {message}
  POST|DELETE /api/websocket/disconnect   ?connection_id= | ?user_id=
  POST        /api/websocket/heartbeat    ?connection_id=
"""

import time
from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from messenger.application.commands.connections import (
    BroadcastCommand,
    BroadcastHandler,
    ConnectUserCommand,
    ConnectUserHandler,
    DisconnectCommand,
    DisconnectHandler,
    HeartbeatCommand,
    HeartbeatHandler,
    SendDirectCommand,
    SendDirectHandler,
)
from messenger.application.queries.connections import (
    GetStatsHandler,
    GetStatsQuery,
    ListOnlineUsersHandler,
    ListOnlineUsersQuery,
)
from messenger.domain.exceptions import DomainValidationError, EntityNotFoundError
from messenger.presentation.dependencies.auth import AuthUser, get_current_user
from messenger.presentation.dependencies.providers import (
    get_broadcast_handler,
    get_connect_user_handler,
    get_disconnect_handler,
    get_heartbeat_handler,
    get_online_users_handler,
    get_send_direct_handler,
    get_stats_handler,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class ConnectRequest(BaseModel):
    user_id: Optional[str] = None


class SendDirectRequest(BaseModel):
    to_user: str
    message: str


class BroadcastRequest(BaseModel):
    message: str


class StatsResponse(BaseModel):
    total_connections: int
    active_users: int
    timestamp: int


class OnlineUsersResponse(BaseModel):
    online_users: list[str]
    count: int
    timestamp: int


class ConnectResponse(BaseModel):
    connection_id: str
    user_id: str
    connected: bool = True
    timestamp: int


class SendDirectResponse(BaseModel):
    sent: bool = True
    to: str
    message: str
    recipient_online: bool


class BroadcastResponse(BaseModel):
    broadcast: bool = True
    message: str
    sent_to: int


class DisconnectResponse(BaseModel):
    disconnected: bool = True
    connection_id: Optional[str] = None
    user_id: Optional[str] = None


class HeartbeatResponse(BaseModel):
    connection_id: str
    alive: bool = True
    timestamp: int


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/websocket", tags=["websocket"])


# ==================== ENDPOINTS ====================


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    handler: GetStatsHandler = Depends(get_stats_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    return StatsResponse(**handler.execute(GetStatsQuery()))


@router.get("/online", response_model=OnlineUsersResponse)
def get_online_users(
    handler: ListOnlineUsersHandler = Depends(get_online_users_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    online_users = handler.execute(ListOnlineUsersQuery())
    return OnlineUsersResponse(
        online_users=online_users,
        count=len(online_users),
        timestamp=int(time.time()),
    )


@router.post("/connect", response_model=ConnectResponse)
def connect(
    user_id: Optional[str] = None,
    body: Optional[ConnectRequest] = None,
    handler: ConnectUserHandler = Depends(get_connect_user_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    # Query param, then JSON body, then the token's user
    resolved_user = user_id or (body.user_id if body else None) or current_user.username
    try:
        result = handler.execute(ConnectUserCommand(user_id=resolved_user))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return ConnectResponse(
        connection_id=result.connection_id,
        user_id=result.user_id,
        timestamp=int(time.time()),
    )


@router.post("/send", response_model=SendDirectResponse)
def send_direct(
    request: SendDirectRequest,
    handler: SendDirectHandler = Depends(get_send_direct_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        recipient_online = handler.execute(
            SendDirectCommand(
                from_user=current_user.username,
                to_user=request.to_user,
                message=request.message,
            )
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return SendDirectResponse(
        to=request.to_user,
        message=request.message,
        recipient_online=recipient_online,
    )


@router.post("/broadcast", response_model=BroadcastResponse)
def broadcast(
    request: BroadcastRequest,
    handler: BroadcastHandler = Depends(get_broadcast_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        sent_to = handler.execute(
            BroadcastCommand(from_user=current_user.username, message=request.message)
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    logger.info("Broadcast from %s reached %d users", current_user.username, sent_to)
    return BroadcastResponse(message=request.message, sent_to=sent_to)


@router.api_route(
    "/disconnect",
    methods=["POST", "DELETE"],
    response_model=DisconnectResponse,
    response_model_exclude_none=True,
)
def disconnect(
    connection_id: Optional[str] = None,
    user_id: Optional[str] = None,
    handler: DisconnectHandler = Depends(get_disconnect_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        handler.execute(DisconnectCommand(connection_id=connection_id, user_id=user_id))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    if connection_id:
        return DisconnectResponse(connection_id=connection_id)
    return DisconnectResponse(user_id=user_id)


@router.post("/heartbeat", response_model=HeartbeatResponse)
def heartbeat(
    connection_id: str = "",
    handler: HeartbeatHandler = Depends(get_heartbeat_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        handler.execute(HeartbeatCommand(connection_id=connection_id))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return HeartbeatResponse(connection_id=connection_id, timestamp=int(time.time()))
