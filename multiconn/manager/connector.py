"""
Connector-based connection manager, dood!

This module provides ConnectorManager, an AbstractManager whose fallback
factory dispatches on the configured driver through a registry of
ConnectorInterface instances instead of hardcoded branching.
"""

import logging
from typing import Any, Dict, List

from .abstract import AbstractManager
from .exceptions import DriverNotSpecifiedError, UnsupportedDriverError
from .interface import ConnectorInterface
from .types import ConfigSource, ConnectionConfig

logger = logging.getLogger(__name__)


class ConnectorManager(AbstractManager):
    """
    Manager creating connections through per-driver connectors.

    Subclasses list their built-in connectors in getDefaultConnectors(),
    more can be added at runtime with registerConnector(). Extensions
    registered with extend() still take priority over connectors.

    Usage:
        >>> class DatabaseManager(ConnectorManager):
        ...     def getConfigName(self) -> str:
        ...         return "database"
        ...
        ...     def getDefaultConnectors(self):
        ...         return {"sqlite": SqliteConnector(), "postgres": PostgresConnector()}
        >>>
        >>> manager = DatabaseManager(configManager)
        >>> manager.registerConnector("mysql", MysqlConnector())
        >>> db = manager.connection("reports")  # dispatched on reports' driver
    """

    def __init__(self, config: ConfigSource):
        """
        Initialize the manager and register default connectors.

        Args:
            config: Configuration source used to resolve connection settings
        """
        super().__init__(config)
        self._connectors: Dict[str, ConnectorInterface] = {}

        for driver, connector in self.getDefaultConnectors().items():
            self.registerConnector(driver, connector)

    def getDefaultConnectors(self) -> Dict[str, ConnectorInterface]:
        """
        Get connectors available on every instance.

        Returns:
            Mapping of driver name to connector, empty by default
        """
        return {}

    def registerConnector(self, driver: str, connector: ConnectorInterface) -> None:
        """
        Register a connector for a driver, replacing any existing one.

        Args:
            driver: Driver name as used in connection configuration
            connector: Connector creating connections for this driver
        """
        self._connectors[driver] = connector
        logger.debug(f"Registered connector {type(connector).__name__} for driver '{driver}', dood!")

    def getConnector(self, driver: str) -> ConnectorInterface:
        """
        Get the connector for a driver.

        Args:
            driver: Driver name

        Returns:
            The registered connector

        Raises:
            UnsupportedDriverError: If no connector is registered for the driver
        """
        if driver not in self._connectors:
            raise UnsupportedDriverError(driver)

        return self._connectors[driver]

    def listConnectors(self) -> List[str]:
        """
        Get list of all registered driver names.

        Returns:
            List of driver names
        """
        return list(self._connectors.keys())

    def createConnection(self, config: ConnectionConfig) -> Any:
        """
        Create a connection using the connector of the configured driver.

        Args:
            config: Resolved connection configuration

        Returns:
            The connection created by the connector

        Raises:
            DriverNotSpecifiedError: If the config has no string driver
            UnsupportedDriverError: If the driver has no connector
        """
        driver = config.get("driver")

        if not isinstance(driver, str) or not driver:
            raise DriverNotSpecifiedError(config["name"])

        return self.getConnector(driver).connect(config)
