"""
Abstract storage backend interface

Every storage connection created by StorageManager implements this class.
"""

from abc import ABC, abstractmethod


class AbstractStorageBackend(ABC):
    """
    Abstract base class for storage backends.

    Keys passed to the methods are raw keys, backends sanitize them with
    sanitizeKey() and wrap backend-specific failures in StorageBackendError.
    """

    @abstractmethod
    def store(self, key: str, data: bytes) -> None:
        """
        Store binary data under the key, overwriting any existing object.

        Raises:
            StorageKeyError: If the key is invalid
            StorageBackendError: If the storage operation fails
        """
        pass

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """
        Retrieve binary data for the key.

        Returns:
            The binary data, None if the key does not exist

        Raises:
            StorageKeyError: If the key is invalid
            StorageBackendError: If the retrieval fails (not for missing keys)
        """
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if an object exists for the key."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete the object for the key.

        Returns:
            True if the object was deleted, False if it did not exist
        """
        pass
