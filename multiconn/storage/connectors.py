"""
Storage connectors

Each connector turns a resolved "storage.connections.<name>" mapping into a
storage backend, validating the driver-specific parameters first.
"""

import logging
from typing import List

from multiconn.manager import ConnectionConfig, ConnectorInterface

from .backends import FSStorageBackend, NullStorageBackend, S3StorageBackend
from .exceptions import StorageConfigError

logger = logging.getLogger(__name__)


def requireParams(config: ConnectionConfig, params: List[str]) -> None:
    """
    Ensure all required parameters are present and non-empty.

    Raises:
        StorageConfigError: If any parameter is missing
    """
    missingParams = [p for p in params if not config.get(p)]
    if missingParams:
        raise StorageConfigError(
            f"Storage connection [{config.get('name')}] missing required parameters: {', '.join(missingParams)}"
        )


class NullConnector(ConnectorInterface):
    """Connector for the "null" driver."""

    def connect(self, config: ConnectionConfig) -> NullStorageBackend:
        logger.info(f"Initialized NullStorageBackend for [{config['name']}], dood!")
        return NullStorageBackend()


class FSConnector(ConnectorInterface):
    """
    Connector for the "fs" driver.

    Configuration:
        driver = "fs"
        base-dir = "./storage/objects"
    """

    def connect(self, config: ConnectionConfig) -> FSStorageBackend:
        requireParams(config, ["base-dir"])
        backend = FSStorageBackend(config["base-dir"])
        logger.info(f"Initialized FSStorageBackend for [{config['name']}] with base-dir: {backend.baseDir}, dood!")
        return backend


class S3Connector(ConnectorInterface):
    """
    Connector for the "s3" driver.

    Configuration:
        driver = "s3"
        endpoint = "https://s3.amazonaws.com"
        region = "us-east-1"
        key-id = "..."
        key-secret = "..."
        bucket = "my-bucket"
        prefix = ""  # optional
    """

    REQUIRED_PARAMS = ["endpoint", "region", "key-id", "key-secret", "bucket"]

    def connect(self, config: ConnectionConfig) -> S3StorageBackend:
        requireParams(config, self.REQUIRED_PARAMS)
        backend = S3StorageBackend(
            endpoint=config["endpoint"],
            region=config["region"],
            keyId=config["key-id"],
            keySecret=config["key-secret"],
            bucket=config["bucket"],
            prefix=config.get("prefix", ""),
        )
        logger.info(
            f"Initialized S3StorageBackend for [{config['name']}] with bucket: {backend.bucket}, "
            f"prefix: {backend.prefix}, dood!"
        )
        return backend
