"""Auth DTOs for API responses."""

from typing import Optional
from pydantic import BaseModel


class TokenDTO(BaseModel):
    """Issued access token."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int
    username: Optional[str] = None
