"""
Push gateway without a transport.

Clients poll the registry over HTTP, so there is no socket to write to;
each push is logged as "sent" and counted in the push metrics.
"""

import json
import logging
from typing import Any

from messenger.domain.ports.push_gateway import PushGateway
from messenger.observability.metrics import increment_pushes

logger = logging.getLogger(__name__)


class LoggingPushGateway(PushGateway):
    def send_to_user(self, user_id: str, payload: dict[str, Any]) -> None:
        logger.info("Message sent to user %s: %s", user_id, json.dumps(payload))
        increment_pushes(payload.get("type", "unknown"))

    def broadcast(self, user_ids: list[str], payload: dict[str, Any]) -> int:
        logger.info(
            "Broadcast %s sent to %d users (simulated)",
            payload.get("type", "message"),
            len(user_ids),
        )
        increment_pushes(payload.get("type", "broadcast"))
        return len(user_ids)
