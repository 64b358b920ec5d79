"""
UserEmail Value Object - Wraps user email with validation.
"""

import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class UserEmail:
    value: str  # user_email, presented as email

    def __post_init__(self):
        if not self.value or not EMAIL_PATTERN.match(self.value):
            raise ValueError("Invalid email format")

    def __str__(self) -> str:
        return self.value
