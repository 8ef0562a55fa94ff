"""
Null storage backend implementation
"""

from ..utils import sanitizeKey
from .abstract import AbstractStorageBackend


class NullStorageBackend(AbstractStorageBackend):
    """
    No-op storage backend.

    Validates keys but stores nothing: get() always returns None,
    exists() and delete() always return False. Useful for tests and
    for disabling storage through configuration.
    """

    def store(self, key: str, data: bytes) -> None:
        sanitizeKey(key)

    def get(self, key: str) -> bytes | None:
        sanitizeKey(key)
        return None

    def exists(self, key: str) -> bool:
        sanitizeKey(key)
        return False

    def delete(self, key: str) -> bool:
        sanitizeKey(key)
        return False
