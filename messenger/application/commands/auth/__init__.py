"""Auth commands."""

from .login import LoginCommand, LoginHandler
from .register import RegisterCommand, RegisterHandler
from .refresh_token import RefreshTokenCommand, RefreshTokenHandler

__all__ = [
    "LoginCommand",
    "LoginHandler",
    "RegisterCommand",
    "RegisterHandler",
    "RefreshTokenCommand",
    "RefreshTokenHandler",
]
