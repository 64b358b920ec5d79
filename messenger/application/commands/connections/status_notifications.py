"""Presence notifications pushed to everyone online."""

import logging
import time

from messenger.domain.ports.push_gateway import PushGateway
from messenger.domain.ports.repositories import ConnectionRepository

logger = logging.getLogger(__name__)


def notify_user_status_change(
    connections: ConnectionRepository,
    push_gateway: PushGateway,
    user_id: str,
    is_online: bool,
) -> None:
    notification = {
        "type": "user_status_change",
        "user_id": user_id,
        "is_online": is_online,
        "timestamp": int(time.time()),
    }
    push_gateway.broadcast(connections.online_users(), notification)
    logger.info(
        "User status change broadcasted: %s -> %s",
        user_id,
        "online" if is_online else "offline",
    )
