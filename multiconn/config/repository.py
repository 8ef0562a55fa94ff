"""
In-memory configuration repository with dotted keys.
"""

import copy
from typing import Any, Dict, Mapping, Optional


class ConfigRepository:
    """
    Nested dictionary accessed with dot-joined keys, dood!

    Satisfies the ConfigSource protocol consumed by connection managers.

    Example:
        >>> config = ConfigRepository({"storage": {"default": "local"}})
        >>> config.get("storage.default")
        'local'
        >>> config.set("storage.connections.local.driver", "fs")
        >>> config.get("storage.connections")
        {'local': {'driver': 'fs'}}
    """

    def __init__(self, items: Optional[Mapping[str, Any]] = None):
        self.config: Dict[str, Any] = copy.deepcopy(dict(items or {}))

    def has(self, key: str) -> bool:
        """Check whether a value is stored under the key."""
        missing = object()
        return self.get(key, missing) is not missing

    def get(self, key: Optional[str], default: Any = None) -> Any:
        """
        Get configuration value by dotted key.

        A literal top-level key (even one containing dots) wins over
        nested lookup.

        Args:
            key: Dot-joined key, None to get the whole configuration
            default: Value to return when the key is absent

        Returns:
            The stored value or ``default``
        """
        if key is None:
            return self.config

        if key in self.config:
            return self.config[key]

        value: Any = self.config
        for segment in key.split("."):
            if not isinstance(value, Mapping) or segment not in value:
                return default
            value = value[segment]

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Store configuration value under dotted key.

        Missing intermediate levels are created, non-dict intermediate
        values are replaced.

        Args:
            key: Dot-joined key
            value: Value to store
        """
        *parents, last = key.split(".")

        target = self.config
        for segment in parents:
            if not isinstance(target.get(segment), dict):
                target[segment] = {}
            target = target[segment]

        target[last] = value

    def all(self) -> Dict[str, Any]:
        """Get deep copy of the whole configuration."""
        return copy.deepcopy(self.config)
