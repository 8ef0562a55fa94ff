"""
multiconn - named connection managers, dood!

Subpackages:
- multiconn.manager: AbstractManager, ConnectorManager and exceptions
- multiconn.config: dotted-key configuration sources (in-memory and TOML)
- multiconn.storage: StorageManager with null/fs/s3 backends
"""

__version__ = "0.1.0"
