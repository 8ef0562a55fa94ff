"""
Storage manager: named object storage connections

This module provides StorageManager, a ConnectorManager whose connections
are storage backends (null, filesystem, S3) configured under "storage".
"""

from typing import Dict

from multiconn.manager import ConnectorInterface, ConnectorManager

from .backends import AbstractStorageBackend
from .connectors import FSConnector, NullConnector, S3Connector


class StorageManager(ConnectorManager):
    """
    Manager of named object storage connections.

    Configuration format:
        [storage]
        default = "local"

        [storage.connections.local]
        driver = "fs"
        base-dir = "./storage/objects"

        [storage.connections.archive]
        driver = "s3"
        endpoint = "https://storage.yandexcloud.net"
        region = "ru-central1"
        key-id = "${S3_KEY_ID}"
        key-secret = "${S3_KEY_SECRET}"
        bucket = "archive"

    Usage:
        storage = StorageManager(ConfigManager("config.toml"))

        storage.connection().store("my-key", b"data")
        data = storage.connection("archive").get("my-key")

        # Calls are forwarded to the default connection as well
        storage.exists("my-key")
    """

    def getConfigName(self) -> str:
        return "storage"

    def getDefaultConnectors(self) -> Dict[str, ConnectorInterface]:
        return {
            "null": NullConnector(),
            "fs": FSConnector(),
            "s3": S3Connector(),
        }

    def connection(self, name: str | None = None) -> AbstractStorageBackend:
        """Get a storage backend by connection name, see AbstractManager.connection()."""
        return super().connection(name)
