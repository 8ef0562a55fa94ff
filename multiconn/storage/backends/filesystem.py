"""
Filesystem storage backend implementation

Stores objects as files in a flat local directory.
"""

import os
from pathlib import Path

from ..exceptions import StorageBackendError
from ..utils import sanitizeKey
from .abstract import AbstractStorageBackend


class FSStorageBackend(AbstractStorageBackend):
    """
    Filesystem-based storage backend.

    Objects are written to a temporary file first and then renamed over the
    target, so readers never see a partially written object.

    Args:
        baseDir: Base directory path for storage (created if needed)

    Raises:
        StorageBackendError: If baseDir cannot be created or is not a directory

    Example:
        >>> backend = FSStorageBackend("/tmp/storage")
        >>> backend.store("test-key", b"data")
        >>> backend.get("test-key")
        b'data'
    """

    def __init__(self, baseDir: str):
        self.baseDir = Path(baseDir)

        try:
            self.baseDir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageBackendError(f"Failed to create base directory '{baseDir}': {e}", originalError=e)

        if not self.baseDir.is_dir():
            raise StorageBackendError(f"Base path '{baseDir}' exists but is not a directory")

    def _getFilePath(self, key: str) -> Path:
        return self.baseDir / sanitizeKey(key)

    def store(self, key: str, data: bytes) -> None:
        filePath = self._getFilePath(key)
        tempPath = filePath.with_name(filePath.name + ".tmp")

        try:
            with open(tempPath, "wb") as f:
                f.write(data)
            os.chmod(tempPath, 0o644)
            tempPath.replace(filePath)
        except OSError as e:
            tempPath.unlink(missing_ok=True)
            raise StorageBackendError(f"Failed to store object with key '{key}': {e}", originalError=e)

    def get(self, key: str) -> bytes | None:
        filePath = self._getFilePath(key)

        try:
            with open(filePath, "rb") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageBackendError(f"Failed to read object with key '{key}': {e}", originalError=e)

    def exists(self, key: str) -> bool:
        return self._getFilePath(key).is_file()

    def delete(self, key: str) -> bool:
        filePath = self._getFilePath(key)

        try:
            filePath.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageBackendError(f"Failed to delete object with key '{key}': {e}", originalError=e)
