"""
Connection manager exceptions

This module defines the exception hierarchy for connection managers.
All manager-related errors inherit from ManagerError base class.
"""

from typing import Any


class ManagerError(Exception):
    """
    Base exception for all connection manager errors.

    Catch this to handle any configuration or resolution failure generically.
    """

    pass


class ConfigurationNotFoundError(ManagerError):
    """
    Exception raised when a named configuration entry is missing.

    This exception is raised when:
    - The configuration section (e.g. ``storage.connections``) is absent
    - The section is not a mapping
    - The section has no entry (or an empty entry) for the requested name

    Args:
        description: Human readable kind of configuration, e.g. "Connection"
        name: The requested configuration name
    """

    def __init__(self, description: str, name: str):
        super().__init__(f"{description} [{name}] not configured.")
        self.description = description
        self.name = name


class ConfigurationNotArrayError(ManagerError):
    """
    Exception raised when a named configuration entry is not a mapping.

    Args:
        description: Human readable kind of configuration, e.g. "Connection"
        name: The requested configuration name
    """

    def __init__(self, description: str, name: str):
        super().__init__(f"{description} [{name}] configuration must be a mapping.")
        self.description = description
        self.name = name


class DefaultConnectionMustBeStringError(ManagerError):
    """
    Exception raised when the default connection setting is missing or not a string.

    Args:
        value: The value found in configuration (None when absent)
    """

    def __init__(self, value: Any = None):
        super().__init__("Default connection must be a string")
        self.value = value


class ExtensionMustReturnObjectError(ManagerError):
    """
    Exception raised when an extension resolver returns a non-object value.

    Use the forExtension() and forDriver() constructors, they record which
    kind of key the failing resolver was registered under.
    """

    def __init__(self, message: str, key: str, isDriver: bool = False):
        super().__init__(message)
        self.key = key
        self.isDriver = isDriver

    @classmethod
    def forExtension(cls, name: str) -> "ExtensionMustReturnObjectError":
        """Create error for resolver registered under a connection name."""
        return cls(f"Extension for [{name}] must return an object", name)

    @classmethod
    def forDriver(cls, driver: str) -> "ExtensionMustReturnObjectError":
        """Create error for resolver registered under a driver name."""
        return cls(f"Extension for driver [{driver}] must return an object", driver, isDriver=True)


class DriverNotSpecifiedError(ManagerError):
    """
    Exception raised when a connection configuration has no usable driver.

    Args:
        name: The connection name whose configuration lacks a driver
    """

    def __init__(self, name: str):
        super().__init__(f"A driver must be specified for connection [{name}].")
        self.name = name


class UnsupportedDriverError(ManagerError):
    """
    Exception raised when no connector is registered for a driver.

    Args:
        driver: The unsupported driver name
    """

    def __init__(self, driver: str):
        super().__init__(f"Unsupported driver [{driver}].")
        self.driver = driver
