"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps each `kind` to an HTTP status code.
"""

from roomchat.domain.exceptions.entity_not_found import EntityNotFoundError
from roomchat.domain.exceptions.access_denied import AccessDeniedError
from roomchat.domain.exceptions.validation_error import DomainValidationError
from roomchat.domain.exceptions.unauthenticated import UnauthenticatedError
from roomchat.domain.exceptions.storage_error import StorageError, StorageTimeoutError
from roomchat.domain.exceptions.room_already_exists import RoomAlreadyExistsError

# Stable error kinds, used by API error bodies and by the HTTP client.
ERROR_KINDS: dict[str, type[Exception]] = {
    exc.kind: exc
    for exc in (
        DomainValidationError,
        EntityNotFoundError,
        UnauthenticatedError,
        AccessDeniedError,
        StorageError,
        StorageTimeoutError,
        RoomAlreadyExistsError,
    )
}

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "UnauthenticatedError",
    "StorageError",
    "StorageTimeoutError",
    "RoomAlreadyExistsError",
    "ERROR_KINDS",
]
