"""
Runnable services.

Each service owns its stores and serves its routers with uvicorn on a
background thread:

  AuthService       :8001  /api/auth/*
  UserService       :8002  /api/users/*
  MessageService    :8003  /api/messages/*, /api/conversations/*
  WebSocketService  :8004  /api/websocket/* (+ idle connection sweep)
"""

from messenger.services.service_base import ServiceBase
from messenger.services.http_service import HttpService
from messenger.services.auth_service import AuthService
from messenger.services.user_service import UserService
from messenger.services.message_service import MessageService
from messenger.services.websocket_service import WebSocketService

__all__ = [
    "ServiceBase",
    "HttpService",
    "AuthService",
    "UserService",
    "MessageService",
    "WebSocketService",
]
