"""
EntityNotFoundError - A user, conversation, message or connection lookup came back empty.

Also raised when a message exists but the caller is not its recipient (mark
read) or sender (delete), so message ids of other users are not revealed.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    def __init__(self, message: str = "Not found"):
        super().__init__(message)
