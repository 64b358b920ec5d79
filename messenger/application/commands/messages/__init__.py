"""Message commands."""

from .send_message import SendMessageCommand, SendMessageHandler, SendMessageResult
from .mark_read import MarkReadCommand, MarkReadHandler
from .delete_message import DeleteMessageCommand, DeleteMessageHandler

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
    "SendMessageResult",
    "MarkReadCommand",
    "MarkReadHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
]
