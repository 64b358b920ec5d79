"""
AccessDeniedError - The caller is not a participant of the conversation they asked for.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    def __init__(self, message: str = "You don't have access to this conversation"):
        super().__init__(message)
