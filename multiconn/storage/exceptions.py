"""
Storage exceptions

This module defines the exception hierarchy for storage connections.
All storage-related errors inherit from StorageError base class.
"""


class StorageError(Exception):
    """
    Base exception for all storage errors.

    Catch this to handle any storage error generically.
    """

    pass


class StorageKeyError(StorageError):
    """
    Exception raised when a storage key is invalid.

    This exception is raised when a key is empty, too long, or becomes
    empty after sanitization.
    """

    pass


class StorageConfigError(StorageError):
    """
    Exception raised when a storage connection is misconfigured.

    This exception is raised by storage connectors when a required
    driver-specific parameter is missing (e.g. "base-dir" for the fs
    driver or "bucket" for the s3 driver).
    """

    pass


class StorageBackendError(StorageError):
    """
    Exception raised when a storage backend operation fails.

    Wraps backend-specific errors such as file system I/O errors or
    S3 client errors.

    Args:
        message: Description of the backend error
        originalError: The original exception that caused this error (optional)
    """

    def __init__(self, message: str, originalError: Exception | None = None):
        super().__init__(message)
        self.originalError = originalError
