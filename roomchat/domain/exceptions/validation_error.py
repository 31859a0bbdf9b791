"""
DomainValidationError - Raised for malformed or empty input
(no members, self-pair, empty body).
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    kind = "validation_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
