"""
Storage key sanitization.
"""

import re

from .exceptions import StorageKeyError

MAX_KEY_LENGTH = 255

# Anything outside alphanumeric, underscore, hyphen and dot
DISALLOWED_CHARS_PATTERN = re.compile(r"[^a-zA-Z0-9_\-\.]")


def sanitizeKey(key: str) -> str:
    """
    Sanitize a storage key to prevent path traversal and ensure safe filenames.

    Control characters are dropped, path separators become underscores,
    ".." sequences are removed, leading/trailing whitespace, dots and
    underscores are stripped and any remaining unsafe character is dropped.

    Args:
        key: The storage key to sanitize

    Returns:
        The sanitized key string

    Raises:
        StorageKeyError: If the key is empty, too long, or empty after sanitization

    Examples:
        >>> sanitizeKey("valid-key.txt")
        'valid-key.txt'
        >>> sanitizeKey("../../../etc/passwd")
        'etc_passwd'
    """
    if not key or not key.strip():
        raise StorageKeyError("Storage key cannot be empty or only whitespace")

    sanitized = "".join(char for char in key if ord(char) > 31 and ord(char) != 127)
    sanitized = sanitized.replace("/", "_").replace("\\", "_").replace("..", "")
    sanitized = DISALLOWED_CHARS_PATTERN.sub("", sanitized.strip(" ._"))

    if not sanitized:
        raise StorageKeyError(f"Storage key is empty after sanitization. Original key: '{key}'")

    if len(sanitized) > MAX_KEY_LENGTH:
        raise StorageKeyError(f"Storage key exceeds maximum length of {MAX_KEY_LENGTH} characters: {len(sanitized)}")

    return sanitized
