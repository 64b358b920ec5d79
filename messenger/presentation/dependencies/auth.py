"""
Authentication Dependency for FastAPI.

- Extracts the bearer token from the Authorization header
- Checks it with the service's TokenService
- Returns the AuthUser for use in route handlers
- Raises HTTPException 401 if unauthorized
"""

from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from messenger.domain.ports.token_service import TokenService
from messenger.presentation.dependencies.providers import get_token_service


@dataclass
class AuthUser:
    username: str

    def __post_init__(self):
        if not self.username:
            raise ValueError("AuthUser must have a username.")


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> AuthUser:
    """
    Resolve the caller from the bearer token.

    Raises:
        HTTPException 401 if the header is missing, the token does not verify,
        or no username can be read from it
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid Authorization header",
        )

    token = credentials.credentials
    if not token_service.verify(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    username = token_service.extract_username(token)
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not extract username from token",
        )

    return AuthUser(username=username)
