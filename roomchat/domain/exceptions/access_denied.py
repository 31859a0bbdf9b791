"""
AccessDeniedError - Raised when a caller may not act on a resource
(banned identity, non-member reading a room).
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to access a resource"""

    kind = "forbidden"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
        self.message = message
