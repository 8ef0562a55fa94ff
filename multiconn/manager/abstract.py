"""
Abstract connection manager, dood!

This module provides AbstractManager, the base class for per-service
managers (cache, booking, database, storage...). It lazily creates named
connections from configuration, caches them, and resolves creation through
registered extensions before falling back to the subclass factory.
"""

import inspect
import logging
from abc import abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .exceptions import (
    ConfigurationNotArrayError,
    ConfigurationNotFoundError,
    DefaultConnectionMustBeStringError,
    ExtensionMustReturnObjectError,
)
from .interface import ManagerInterface
from .types import ConfigSource, ConnectionConfig, ExtensionResolver

logger = logging.getLogger(__name__)

# Values an extension resolver must not return
NON_OBJECT_TYPES = (bool, int, float, complex, str, bytes, bytearray, list, tuple, dict, set, frozenset)

_MISSING = object()


def isConnectionObject(value: Any) -> bool:
    """
    Check whether a value is acceptable as a connection instance.

    None and exact instances of scalars, strings and plain containers are
    rejected. Subclass instances (namedtuple, dict-based clients) are objects.

    Args:
        value: Value returned by an extension resolver

    Returns:
        True if the value can be cached as a connection
    """
    return value is not None and type(value) not in NON_OBJECT_TYPES


class AbstractManager(ManagerInterface):
    """
    Base class for managers of named, configuration-driven connections.

    Configuration layout (``configName`` comes from getConfigName()):

        {configName}.default                 -> name of the default connection
        {configName}.connections.{name}      -> mapping passed to the factory

    Creation order for a connection named ``name``:
    1. extension registered under ``name``
    2. extension registered under the config's ``driver`` value
    3. createConnection() implemented by the subclass

    Usage:
        >>> class CacheManager(AbstractManager):
        ...     def getConfigName(self) -> str:
        ...         return "cache"
        ...
        ...     def createConnection(self, config):
        ...         return DictCache(**config.get("options", {}))
        >>>
        >>> manager = CacheManager(ConfigRepository({
        ...     "cache": {"default": "local", "connections": {"local": {"driver": "dict"}}},
        ... }))
        >>> manager.connection() is manager.connection("local")
        True
        >>> manager.extend("redis", lambda config, manager: RedisCache(config["host"]))

    Calling an attribute the manager doesn't define is forwarded to the
    default connection, so ``manager.getStats()`` is
    ``manager.connection().getStats()``.

    Names defined on the manager class itself (including properties that
    raise AttributeError) and names starting with "_" are never forwarded.

    Thread Safety:
        None. Guard connection()/reconnect()/disconnect()/extend() externally
        if an instance is shared between threads.
    """

    def __init__(self, config: ConfigSource):
        """
        Initialize the manager.

        Args:
            config: Configuration source used to resolve connection settings
        """
        self._config = config
        self._connections: Dict[str, Any] = {}
        self._extensions: Dict[str, ExtensionResolver] = {}

    def __getattr__(self, name: str) -> Any:
        # Only called for attributes missing on the manager itself
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        # A property of the manager raised AttributeError itself
        if inspect.getattr_static(type(self), name, _MISSING) is not _MISSING:
            raise AttributeError(f"'{type(self).__name__}.{name}' raised AttributeError while being accessed")
        return getattr(self.connection(), name)

    @abstractmethod
    def getConfigName(self) -> str:
        """
        Get the configuration namespace, e.g. "storage".

        Returns:
            Key prefix used to look up this manager's settings
        """
        pass

    @abstractmethod
    def createConnection(self, config: ConnectionConfig) -> Any:
        """
        Create a connection when no extension applies.

        Args:
            config: Resolved connection configuration (with "name" injected)

        Returns:
            The created connection instance
        """
        pass

    def getConfig(self) -> ConfigSource:
        """Get the configuration source."""
        return self._config

    def _resolveName(self, name: Optional[str]) -> str:
        return name or self.getDefaultConnection()

    def connection(self, name: Optional[str] = None) -> Any:
        """
        Get a connection instance.

        The connection is created on first request and cached, subsequent
        calls with the same name return the identical instance.

        Args:
            name: Connection name, None or "" to use the default connection

        Returns:
            The connection instance

        Raises:
            DefaultConnectionMustBeStringError: If name is omitted and no valid default is set
            ConfigurationNotFoundError: If the connection is not configured
            ConfigurationNotArrayError: If the connection entry is not a mapping
            ExtensionMustReturnObjectError: If an extension returned a non-object
        """
        name = self._resolveName(name)

        if name not in self._connections:
            self._connections[name] = self._makeConnection(name)
            logger.debug(f"Created {self.getConfigName()} connection '{name}', dood!")

        return self._connections[name]

    def reconnect(self, name: Optional[str] = None) -> Any:
        """
        Drop the cached connection and create a fresh one.

        The previous instance is not closed, it is only removed from the cache.

        Args:
            name: Connection name, None or "" to use the default connection

        Returns:
            The new connection instance
        """
        name = self._resolveName(name)

        self.disconnect(name)

        return self.connection(name)

    def disconnect(self, name: Optional[str] = None) -> None:
        """
        Remove the connection from the cache.

        Unknown names are ignored.

        Args:
            name: Connection name, None or "" to use the default connection
        """
        name = self._resolveName(name)

        if name in self._connections:
            del self._connections[name]
            logger.debug(f"Disconnected {self.getConfigName()} connection '{name}', dood!")

    def getConnectionConfig(self, name: Optional[str] = None) -> ConnectionConfig:
        """
        Get the configuration for a connection.

        Always re-reads the configuration source.

        Args:
            name: Connection name, None or "" to use the default connection

        Returns:
            Copy of the connection configuration with "name" injected

        Raises:
            ConfigurationNotFoundError: If the connection is not configured
            ConfigurationNotArrayError: If the connection entry is not a mapping
        """
        name = self._resolveName(name)

        return self._getNamedConfig("connections", "Connection", name)

    def getDefaultConnection(self) -> str:
        """
        Get the default connection name.

        Returns:
            The default connection name from configuration

        Raises:
            DefaultConnectionMustBeStringError: If the setting is missing or not a string
        """
        default = self._config.get(f"{self.getConfigName()}.default")

        if not isinstance(default, str):
            raise DefaultConnectionMustBeStringError(default)

        return default

    def setDefaultConnection(self, name: str) -> None:
        """
        Set the default connection name.

        Already created connections are not affected.

        Args:
            name: The connection name to use as default
        """
        self._config.set(f"{self.getConfigName()}.default", name)
        logger.info(f"Set '{name}' as default {self.getConfigName()} connection, dood!")

    def extend(self, key: str, resolver: ExtensionResolver) -> None:
        """
        Register an extension resolver.

        The key is matched against connection names first and against the
        configured driver second. The resolver is called as
        ``resolver(config, manager)`` and must return an object.

        Args:
            key: Connection name or driver name
            resolver: Callable creating the connection

        Example:
            >>> manager.extend("replica", lambda config, manager: Replica(manager.connection("primary")))
        """
        self._extensions[key] = resolver
        logger.info(f"Registered {self.getConfigName()} extension '{key}', dood!")

    def getConnections(self) -> Mapping[str, Any]:
        """
        Get all created connections.

        Returns:
            Read-only live view of connection name to connection instance
        """
        return MappingProxyType(self._connections)

    def getExtensions(self) -> Mapping[str, ExtensionResolver]:
        """
        Get all registered extension resolvers.

        Returns:
            Read-only live view of key to resolver
        """
        return MappingProxyType(self._extensions)

    def _makeConnection(self, name: str) -> Any:
        """
        Create the connection instance (internal helper).

        Args:
            name: Resolved connection name

        Returns:
            The created connection instance

        Raises:
            ExtensionMustReturnObjectError: If an extension returned a non-object
        """
        config = self.getConnectionConfig(name)

        if name in self._extensions:
            connection = self._extensions[name](config, self)

            if not isConnectionObject(connection):
                raise ExtensionMustReturnObjectError.forExtension(name)

            return connection

        driver = config.get("driver")

        if isinstance(driver, str) and driver in self._extensions:
            connection = self._extensions[driver](config, self)

            if not isConnectionObject(connection):
                raise ExtensionMustReturnObjectError.forDriver(driver)

            return connection

        return self.createConnection(config)

    def _getNamedConfig(self, section: str, description: str, name: str) -> ConnectionConfig:
        """
        Get and validate a named entry of a configuration section.

        Args:
            section: Section under the config name, e.g. "connections"
            description: Human readable kind for error messages, e.g. "Connection"
            name: Entry name

        Returns:
            Copy of the entry with "name" injected

        Raises:
            ConfigurationNotFoundError: If the section or entry is missing
            ConfigurationNotArrayError: If the entry is not a mapping
        """
        data = self._config.get(f"{self.getConfigName()}.{section}")

        if not isinstance(data, Mapping):
            raise ConfigurationNotFoundError(description, name)

        entry = data.get(name)

        if not isinstance(entry, Mapping):
            if not entry:
                raise ConfigurationNotFoundError(description, name)
            raise ConfigurationNotArrayError(description, name)

        config = dict(entry)
        config["name"] = name

        return config
