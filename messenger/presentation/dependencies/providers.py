"""
Dependency providers.

Each service puts its stores and services on app.state when the app is
built (see HttpService.app_state). The functions below hand them to routes
through FastAPI's Depends, typed by their domain ports, and assemble the
application handlers on top of them.

Flow:
  app.state.message_repository → get_message_repository → SendMessageHandler
                                          ↓
                               typed as the MessageRepository port
"""

from fastapi import Depends, Request

from messenger.application.commands.auth import (
    LoginHandler,
    RegisterHandler,
    RefreshTokenHandler,
)
from messenger.application.commands.users import (
    UpdateProfileHandler,
    SetOnlineStatusHandler,
)
from messenger.application.commands.messages import (
    SendMessageHandler,
    MarkReadHandler,
    DeleteMessageHandler,
)
from messenger.application.commands.connections import (
    ConnectUserHandler,
    DisconnectHandler,
    HeartbeatHandler,
    SendDirectHandler,
    BroadcastHandler,
)
from messenger.application.queries.users import (
    GetProfileHandler,
    ListUsersHandler,
    SearchUsersHandler,
)
from messenger.application.queries.messages import (
    ListConversationsHandler,
    GetConversationMessagesHandler,
)
from messenger.application.queries.connections import (
    GetStatsHandler,
    ListOnlineUsersHandler,
)
from messenger.domain.ports.push_gateway import PushGateway
from messenger.domain.ports.repositories import (
    ConnectionRepository,
    MessageRepository,
    UserRepository,
)
from messenger.domain.ports.token_service import TokenService


# ==================== STORES & SERVICES ====================


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_message_repository(request: Request) -> MessageRepository:
    return request.app.state.message_repository


def get_connection_repository(request: Request) -> ConnectionRepository:
    return request.app.state.connection_repository


def get_push_gateway(request: Request) -> PushGateway:
    return request.app.state.push_gateway


# ==================== AUTH HANDLERS ====================


def get_login_handler(
    token_service: TokenService = Depends(get_token_service),
) -> LoginHandler:
    return LoginHandler(token_service)


def get_register_handler(
    user_repository: UserRepository = Depends(get_user_repository),
    token_service: TokenService = Depends(get_token_service),
) -> RegisterHandler:
    return RegisterHandler(user_repository, token_service)


def get_refresh_token_handler(
    token_service: TokenService = Depends(get_token_service),
) -> RefreshTokenHandler:
    return RefreshTokenHandler(token_service)


# ==================== USER HANDLERS ====================


def get_profile_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> GetProfileHandler:
    return GetProfileHandler(user_repository)


def get_update_profile_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UpdateProfileHandler:
    return UpdateProfileHandler(user_repository)


def get_list_users_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> ListUsersHandler:
    return ListUsersHandler(user_repository)


def get_search_users_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> SearchUsersHandler:
    return SearchUsersHandler(user_repository)


def get_set_online_status_handler(
    user_repository: UserRepository = Depends(get_user_repository),
) -> SetOnlineStatusHandler:
    return SetOnlineStatusHandler(user_repository)


# ==================== MESSAGE HANDLERS ====================


def get_send_message_handler(
    message_repository: MessageRepository = Depends(get_message_repository),
) -> SendMessageHandler:
    return SendMessageHandler(message_repository)


def get_list_conversations_handler(
    message_repository: MessageRepository = Depends(get_message_repository),
) -> ListConversationsHandler:
    return ListConversationsHandler(message_repository)


def get_conversation_messages_handler(
    message_repository: MessageRepository = Depends(get_message_repository),
) -> GetConversationMessagesHandler:
    return GetConversationMessagesHandler(message_repository)


def get_mark_read_handler(
    message_repository: MessageRepository = Depends(get_message_repository),
) -> MarkReadHandler:
    return MarkReadHandler(message_repository)


def get_delete_message_handler(
    message_repository: MessageRepository = Depends(get_message_repository),
) -> DeleteMessageHandler:
    return DeleteMessageHandler(message_repository)


# ==================== CONNECTION REGISTRY HANDLERS ====================


def get_stats_handler(
    connections: ConnectionRepository = Depends(get_connection_repository),
) -> GetStatsHandler:
    return GetStatsHandler(connections)


def get_online_users_handler(
    connections: ConnectionRepository = Depends(get_connection_repository),
) -> ListOnlineUsersHandler:
    return ListOnlineUsersHandler(connections)


def get_connect_user_handler(
    connections: ConnectionRepository = Depends(get_connection_repository),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> ConnectUserHandler:
    return ConnectUserHandler(connections, push_gateway)


def get_disconnect_handler(
    connections: ConnectionRepository = Depends(get_connection_repository),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> DisconnectHandler:
    return DisconnectHandler(connections, push_gateway)


def get_heartbeat_handler(
    connections: ConnectionRepository = Depends(get_connection_repository),
) -> HeartbeatHandler:
    return HeartbeatHandler(connections)


def get_send_direct_handler(
    connections: ConnectionRepository = Depends(get_connection_repository),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> SendDirectHandler:
    return SendDirectHandler(connections, push_gateway)


def get_broadcast_handler(
    connections: ConnectionRepository = Depends(get_connection_repository),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> BroadcastHandler:
    return BroadcastHandler(connections, push_gateway)
