"""
Token Service Port - Issues and checks bearer tokens.
Implementations: messenger/infrastructure/security/
"""

from abc import ABC, abstractmethod


class TokenService(ABC):
    @abstractmethod
    def issue(self, username: str) -> str: ...

    @abstractmethod
    def verify(self, token: str) -> bool: ...

    @abstractmethod
    def extract_username(self, token: str) -> str:
        """Return the username carried by the token, or "" if it has none."""
        ...
