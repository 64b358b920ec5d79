"""
API Routers - FastAPI endpoint definitions.
"""

from messenger.presentation.api.health import router as health_router
from messenger.presentation.api.metrics import router as metrics_router
from messenger.presentation.api.auth import router as auth_router
from messenger.presentation.api.users import router as users_router
from messenger.presentation.api.messages import router as messages_router
from messenger.presentation.api.websocket import router as websocket_router

__all__ = [
    "health_router",
    "metrics_router",
    "auth_router",
    "users_router",
    "messages_router",
    "websocket_router",
]
