"""
Storage package

Named object storage connections (null, filesystem, S3) managed by
StorageManager.
"""

from .backends import AbstractStorageBackend, FSStorageBackend, NullStorageBackend, S3StorageBackend
from .exceptions import StorageBackendError, StorageConfigError, StorageError, StorageKeyError
from .manager import StorageManager

__all__ = [
    "StorageManager",
    "AbstractStorageBackend",
    "NullStorageBackend",
    "FSStorageBackend",
    "S3StorageBackend",
    "StorageError",
    "StorageKeyError",
    "StorageConfigError",
    "StorageBackendError",
]
