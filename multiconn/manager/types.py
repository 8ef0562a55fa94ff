"""
Core type definitions and protocols for multiconn.manager, dood!

This module contains the type aliases and protocols shared by every manager
implementation: the connection configuration mapping, the configuration
source contract and the extension resolver signature.
"""

from typing import TYPE_CHECKING, Any, Callable, Dict, Protocol

if TYPE_CHECKING:
    from .abstract import AbstractManager

# Resolved configuration of a single named connection
ConnectionConfig = Dict[str, Any]

# Extension resolver: called with the resolved config and the owning manager
ExtensionResolver = Callable[[ConnectionConfig, "AbstractManager"], Any]


class ConfigSource(Protocol):
    """
    Protocol for key-value configuration providers, dood!

    Keys are dot-joined hierarchical strings, e.g. ``"storage.default"`` or
    ``"storage.connections"``. Both ConfigRepository and ConfigManager
    satisfy this protocol.

    Example:
        >>> config = ConfigRepository({"storage": {"default": "local"}})
        >>> config.get("storage.default")
        'local'
        >>> config.set("storage.default", "remote")
    """

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dotted key.

        Args:
            key: Dot-joined configuration key
            default: Value to return when the key is absent

        Returns:
            The stored value or ``default``
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """
        Store configuration value under dotted key.

        Args:
            key: Dot-joined configuration key
            value: Value to store
        """
        ...
