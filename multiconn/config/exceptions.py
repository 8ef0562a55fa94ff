"""
Configuration exceptions
"""


class ConfigLoadError(Exception):
    """
    Exception raised when configuration files cannot be loaded.

    This exception is raised when:
    - The main configuration file is missing and no config directories are given
    - The main configuration file is not valid TOML or cannot be read

    Args:
        message: Description of the loading error
        originalError: The original exception that caused this error (optional)
    """

    def __init__(self, message: str, originalError: Exception | None = None):
        super().__init__(message)
        self.originalError = originalError
