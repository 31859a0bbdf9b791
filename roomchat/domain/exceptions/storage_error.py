"""
Storage errors - Raised when the underlying persistence fails.
Maps to: HTTP 503 (StorageError) / HTTP 504 (StorageTimeoutError)
"""


class StorageError(Exception):
    """The store rejected or failed an operation."""

    kind = "storage_error"

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)
        self.message = message


class StorageTimeoutError(StorageError):
    """The store did not answer within the configured deadline."""

    kind = "storage_timeout"

    def __init__(self, message: str = "Storage operation timed out"):
        super().__init__(message)
