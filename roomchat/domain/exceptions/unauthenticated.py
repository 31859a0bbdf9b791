"""
UnauthenticatedError - Raised when no valid identity is attached to a call.
Maps to: HTTP 401 Unauthorized
"""


class UnauthenticatedError(Exception):
    kind = "unauthenticated"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message
