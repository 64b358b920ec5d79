"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by the application layer and caught by the
presentation layer, which maps them to HTTP status codes.
"""

from messenger.domain.exceptions.entity_not_found import EntityNotFoundError
from messenger.domain.exceptions.access_denied import AccessDeniedError
from messenger.domain.exceptions.validation_error import DomainValidationError
from messenger.domain.exceptions.already_exists import EntityAlreadyExistsError
from messenger.domain.exceptions.authentication_error import AuthenticationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "EntityAlreadyExistsError",
    "AuthenticationError",
]
