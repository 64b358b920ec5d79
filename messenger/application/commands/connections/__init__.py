"""Connection registry commands."""

from .connect_user import ConnectUserCommand, ConnectUserHandler, ConnectResult
from .disconnect import DisconnectCommand, DisconnectHandler
from .heartbeat import HeartbeatCommand, HeartbeatHandler
from .push_message import (
    SendDirectCommand,
    SendDirectHandler,
    BroadcastCommand,
    BroadcastHandler,
)
from .status_notifications import notify_user_status_change

__all__ = [
    "ConnectUserCommand",
    "ConnectUserHandler",
    "ConnectResult",
    "DisconnectCommand",
    "DisconnectHandler",
    "HeartbeatCommand",
    "HeartbeatHandler",
    "SendDirectCommand",
    "SendDirectHandler",
    "BroadcastCommand",
    "BroadcastHandler",
    "notify_user_status_change",
]
