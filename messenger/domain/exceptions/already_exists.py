"""
EntityAlreadyExistsError - Raised when creating an entity whose key is taken.
Maps to: HTTP 409 Conflict
"""


class EntityAlreadyExistsError(Exception):
    def __init__(self, message: str = "The entity already exists."):
        super().__init__(message)
