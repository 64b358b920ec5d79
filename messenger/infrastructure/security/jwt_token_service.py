"""
Signed bearer tokens (HS256) backed by PyJWT.

Claims: sub (username), iat, exp, iss.
"""

import logging
import time

import jwt

from messenger.domain.ports.token_service import TokenService

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JwtTokenService(TokenService):
    def __init__(self, secret: str, issuer: str, expires_in: int = 3600):
        if not secret:
            raise ValueError("JwtTokenService requires a non-empty secret")
        self._secret = secret
        self._issuer = issuer
        self._expires_in = expires_in

    def issue(self, username: str) -> str:
        now = int(time.time())
        return jwt.encode(
            {
                "sub": username,
                "iat": now,
                "exp": now + self._expires_in,
                "iss": self._issuer,
            },
            self._secret,
            algorithm=ALGORITHM,
        )

    def verify(self, token: str) -> bool:
        return self._decode(token) is not None

    def extract_username(self, token: str) -> str:
        claims = self._decode(token)
        if not claims:
            return ""
        return claims.get("sub") or ""

    def _decode(self, token: str):
        if not token:
            return None
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                issuer=self._issuer,
                options={"require": ["exp", "iat", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
        except jwt.InvalidTokenError as e:
            logger.info("Rejected invalid token: %s", e)
        return None
