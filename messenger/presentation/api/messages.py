"""
Messages API Router.

Routes (all require a bearer token):
  POST   /api/messages/send                          {to_user, content} (201)
  GET    /api/conversations                          → caller's conversations
  GET    /api/conversations/{conversation_id}/messages
  PUT    /api/messages/{message_id}/read             (recipient only)
  DELETE /api/messages/{message_id}                  (sender only)

Ownership failures on read/delete surface as 404 so a caller cannot probe
for message ids belonging to others.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from messenger.application.commands.messages import (
    DeleteMessageCommand,
    DeleteMessageHandler,
    MarkReadCommand,
    MarkReadHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from messenger.application.dto.message import ConversationSummaryDTO, MessageDTO
from messenger.application.queries.messages import (
    GetConversationMessagesHandler,
    GetConversationMessagesQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from messenger.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from messenger.presentation.dependencies.auth import AuthUser, get_current_user
from messenger.presentation.dependencies.providers import (
    get_conversation_messages_handler,
    get_delete_message_handler,
    get_list_conversations_handler,
    get_mark_read_handler,
    get_send_message_handler,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SendMessageRequest(BaseModel):
    to_user: str
    content: str


class SendMessageResponse(BaseModel):
    message_id: str
    from_user: str
    to_user: str
    content: str
    timestamp: int
    sent: bool = True


class ConversationListResponse(BaseModel):
    conversations: list[ConversationSummaryDTO]
    total: int


class ConversationMessagesResponse(BaseModel):
    conversation_id: str
    messages: list[MessageDTO]
    total: int


class MarkReadResponse(BaseModel):
    message_id: str
    marked_as_read: bool = True


class DeleteMessageResponse(BaseModel):
    message_id: str
    deleted: bool = True


# ==================== ROUTER ====================

router = APIRouter(tags=["messages"])


# ==================== ENDPOINTS ====================


@router.post(
    "/api/messages/send",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def send_message(
    request: SendMessageRequest,
    handler: SendMessageHandler = Depends(get_send_message_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        result = handler.execute(
            SendMessageCommand(
                from_user=current_user.username,
                to_user=request.to_user,
                content=request.content,
            )
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    logger.info(
        "Message sent from %s to %s: %s",
        current_user.username,
        request.to_user,
        result.message_id,
    )
    return SendMessageResponse(
        message_id=result.message_id,
        from_user=current_user.username,
        to_user=request.to_user,
        content=request.content,
        timestamp=result.timestamp,
    )


@router.get(
    "/api/conversations",
    response_model=ConversationListResponse,
    response_model_exclude_none=True,
)
def list_conversations(
    handler: ListConversationsHandler = Depends(get_list_conversations_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    conversations = handler.execute(ListConversationsQuery(username=current_user.username))
    logger.info(
        "Retrieved %d conversations for user: %s",
        len(conversations),
        current_user.username,
    )
    return ConversationListResponse(
        conversations=[ConversationSummaryDTO.from_entity(c) for c in conversations],
        total=len(conversations),
    )


@router.get(
    "/api/conversations/{conversation_id}/messages",
    response_model=ConversationMessagesResponse,
)
def get_conversation_messages(
    conversation_id: str,
    handler: GetConversationMessagesHandler = Depends(get_conversation_messages_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        messages = handler.execute(
            GetConversationMessagesQuery(
                conversation_id=conversation_id, username=current_user.username
            )
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    logger.info(
        "Retrieved %d messages from conversation %s for user: %s",
        len(messages),
        conversation_id,
        current_user.username,
    )
    return ConversationMessagesResponse(
        conversation_id=conversation_id,
        messages=[MessageDTO.from_entity(m) for m in messages],
        total=len(messages),
    )


@router.put("/api/messages/{message_id}/read", response_model=MarkReadResponse)
def mark_message_read(
    message_id: str,
    handler: MarkReadHandler = Depends(get_mark_read_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        handler.execute(
            MarkReadCommand(message_id=message_id, username=current_user.username)
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    logger.info("Message %s marked as read by %s", message_id, current_user.username)
    return MarkReadResponse(message_id=message_id)


@router.delete("/api/messages/{message_id}", response_model=DeleteMessageResponse)
def delete_message(
    message_id: str,
    handler: DeleteMessageHandler = Depends(get_delete_message_handler),
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        handler.execute(
            DeleteMessageCommand(message_id=message_id, username=current_user.username)
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    logger.info("Message %s deleted by %s", message_id, current_user.username)
    return DeleteMessageResponse(message_id=message_id)
