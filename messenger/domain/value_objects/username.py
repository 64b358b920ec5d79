"""
Username Value Object - 3-50 characters of letters, digits and underscores.
"""

import re
from dataclasses import dataclass

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{3,50}$")


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not self.value or not USERNAME_PATTERN.match(self.value):
            raise ValueError(
                "Username must be 3-50 characters and contain only letters, "
                "numbers, and underscores"
            )

    def __str__(self) -> str:
        return self.value
