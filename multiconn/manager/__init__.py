"""
Connection Manager Library

This library provides a reusable manager abstraction that lazily creates,
caches and recreates named connections from configuration, with runtime
overrides per connection name or per driver.

Example:
    >>> from multiconn.config import ConfigRepository
    >>> from multiconn.manager import AbstractManager
    >>>
    >>> class BookingManager(AbstractManager):
    ...     def getConfigName(self) -> str:
    ...         return "booking"
    ...
    ...     def createConnection(self, config):
    ...         return BookingClient(config["endpoint"])
    >>>
    >>> manager = BookingManager(ConfigRepository({
    ...     "booking": {
    ...         "default": "fedex",
    ...         "connections": {"fedex": {"driver": "fedex", "endpoint": "https://..."}},
    ...     },
    ... }))
    >>> client = manager.connection()  # same as manager.connection("fedex")
    >>> manager.extend("ups", lambda config, manager: UpsClient(config["endpoint"]))
"""

from .abstract import AbstractManager, isConnectionObject
from .connector import ConnectorManager
from .exceptions import (
    ConfigurationNotArrayError,
    ConfigurationNotFoundError,
    DefaultConnectionMustBeStringError,
    DriverNotSpecifiedError,
    ExtensionMustReturnObjectError,
    ManagerError,
    UnsupportedDriverError,
)
from .interface import ConnectorInterface, ManagerInterface
from .types import ConfigSource, ConnectionConfig, ExtensionResolver

__all__ = [
    # Interfaces
    "ManagerInterface",
    "ConnectorInterface",
    "ConfigSource",
    # Managers
    "AbstractManager",
    "ConnectorManager",
    "isConnectionObject",
    # Types
    "ConnectionConfig",
    "ExtensionResolver",
    # Exceptions
    "ManagerError",
    "ConfigurationNotFoundError",
    "ConfigurationNotArrayError",
    "DefaultConnectionMustBeStringError",
    "ExtensionMustReturnObjectError",
    "DriverNotSpecifiedError",
    "UnsupportedDriverError",
]
