"""
Security - Bearer token services.
"""

from messenger.config.settings import Config
from messenger.domain.ports.token_service import TokenService
from messenger.infrastructure.security.demo_token_service import DemoTokenService
from messenger.infrastructure.security.jwt_token_service import JwtTokenService


def create_token_service(backend: str = Config.TOKEN_BACKEND) -> TokenService:
    """Build the token service selected by TOKEN_BACKEND ("demo" or "jwt")."""
    if backend == "demo":
        return DemoTokenService()
    if backend == "jwt":
        return JwtTokenService(
            secret=Config.TOKEN_SECRET,
            issuer=Config.TOKEN_ISSUER,
            expires_in=Config.TOKEN_EXPIRES_IN,
        )
    raise ValueError(f"Unknown token backend: {backend}")


__all__ = [
    "DemoTokenService",
    "JwtTokenService",
    "create_token_service",
]
