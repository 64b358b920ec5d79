"""
Demo token scheme: "jwt_<username>_<32 hex chars>".

Not a credential. There is no signature, expiry or revocation; verify() only
checks the prefix. Use JwtTokenService for anything beyond local demos.
"""

import secrets

from messenger.domain.ports.token_service import TokenService

TOKEN_PREFIX = "jwt_"
DELIMITER = "_"
PADDING_HEX_CHARS = 32


class DemoTokenService(TokenService):
    def issue(self, username: str) -> str:
        padding = secrets.token_hex(PADDING_HEX_CHARS // 2)
        return f"{TOKEN_PREFIX}{username}{DELIMITER}{padding}"

    def verify(self, token: str) -> bool:
        return bool(token) and token.startswith(TOKEN_PREFIX)

    def extract_username(self, token: str) -> str:
        if not self.verify(token):
            return ""
        # The hex padding never contains the delimiter, so the username is
        # everything up to the last one.
        username, delimiter, _ = token[len(TOKEN_PREFIX):].rpartition(DELIMITER)
        if not delimiter:
            return ""
        return username
