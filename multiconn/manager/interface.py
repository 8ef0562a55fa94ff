from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from .types import ConnectionConfig, ExtensionResolver


class ManagerInterface(ABC):
    """
    Abstract base class for connection managers.

    A manager lazily creates named connections from configuration, caches
    them, and lets callers recreate or drop them. Extensions can override
    how a connection is created for a single name or for a whole driver.
    """

    @abstractmethod
    def connection(self, name: Optional[str] = None) -> Any:
        """
        Get a connection instance, creating and caching it on first use.

        Args:
            name: Connection name, None to use the default connection

        Returns:
            The cached connection instance
        """
        pass

    @abstractmethod
    def reconnect(self, name: Optional[str] = None) -> Any:
        """
        Drop the cached connection and create a fresh one.

        Args:
            name: Connection name, None to use the default connection

        Returns:
            The new connection instance
        """
        pass

    @abstractmethod
    def disconnect(self, name: Optional[str] = None) -> None:
        """
        Remove the connection from the cache.

        Args:
            name: Connection name, None to use the default connection
        """
        pass

    @abstractmethod
    def getConnectionConfig(self, name: Optional[str] = None) -> ConnectionConfig:
        """
        Get the configuration for a connection.

        Args:
            name: Connection name, None to use the default connection

        Returns:
            The connection configuration with "name" injected
        """
        pass

    @abstractmethod
    def getDefaultConnection(self) -> str:
        """
        Get the default connection name.

        Returns:
            The default connection name from configuration
        """
        pass

    @abstractmethod
    def setDefaultConnection(self, name: str) -> None:
        """
        Set the default connection name.

        Args:
            name: The connection name to use as default
        """
        pass

    @abstractmethod
    def extend(self, key: str, resolver: ExtensionResolver) -> None:
        """
        Register an extension resolver for a connection name or a driver.

        Args:
            key: Connection name or driver name
            resolver: Callable creating the connection from its config
        """
        pass

    @abstractmethod
    def getConnections(self) -> Mapping[str, Any]:
        """
        Get all created connections.

        Returns:
            Read-only mapping of connection name to connection instance
        """
        pass


class ConnectorInterface(ABC):
    """
    Abstract base class for connectors.

    A connector establishes a connection from a configuration mapping.
    Implementations should validate driver-specific parameters and raise
    if required ones are missing or invalid.
    """

    @abstractmethod
    def connect(self, config: ConnectionConfig) -> Any:
        """
        Establish a connection.

        Args:
            config: The connection configuration

        Returns:
            The established connection instance
        """
        pass
