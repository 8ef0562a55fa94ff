"""
Configuration sources for connection managers.

ConfigRepository is an in-memory dotted-key store, ConfigManager fills one
from TOML files.
"""

from .exceptions import ConfigLoadError
from .manager import ConfigManager, substituteEnvVars
from .repository import ConfigRepository

__all__ = [
    "ConfigRepository",
    "ConfigManager",
    "ConfigLoadError",
    "substituteEnvVars",
]
