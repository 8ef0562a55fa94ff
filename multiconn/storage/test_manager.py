"""
Tests for StorageManager, dood!

Covers driver dispatch to the null/fs/s3 connectors, driver-specific
configuration errors and call forwarding to the default backend.
"""

from unittest.mock import Mock, patch

import pytest

from multiconn.config import ConfigRepository
from multiconn.manager import UnsupportedDriverError

from .backends import FSStorageBackend, NullStorageBackend, S3StorageBackend
from .exceptions import StorageBackendError, StorageConfigError
from .manager import StorageManager


@pytest.fixture
def storageConfig(tmp_path):
    """Create storage configuration with every driver, dood!"""
    return ConfigRepository(
        {
            "storage": {
                "default": "local",
                "connections": {
                    "local": {"driver": "fs", "base-dir": str(tmp_path / "objects")},
                    "disabled": {"driver": "null"},
                    "archive": {
                        "driver": "s3",
                        "endpoint": "https://storage.yandexcloud.net",
                        "region": "ru-central1",
                        "key-id": "test-key-id",
                        "key-secret": "test-key-secret",
                        "bucket": "archive",
                        "prefix": "objects/",
                    },
                    "noBaseDir": {"driver": "fs"},
                    "noBucket": {
                        "driver": "s3",
                        "endpoint": "https://s3.amazonaws.com",
                        "region": "us-east-1",
                        "key-id": "id",
                        "key-secret": "secret",
                    },
                    "ftp": {"driver": "ftp"},
                },
            }
        }
    )


@pytest.fixture
def storageManager(storageConfig):
    return StorageManager(storageConfig)


class TestStorageManager:
    """Test StorageManager connection creation, dood!"""

    def testBuiltinDrivers(self, storageManager):
        assert sorted(storageManager.listConnectors()) == ["fs", "null", "s3"]

    def testDefaultConnectionIsFilesystem(self, storageManager, tmp_path):
        backend = storageManager.connection()

        assert isinstance(backend, FSStorageBackend)
        assert backend.baseDir == tmp_path / "objects"
        assert backend.baseDir.is_dir()

    def testFilesystemRoundTrip(self, storageManager):
        backend = storageManager.connection("local")

        backend.store("report.txt", b"payload")

        assert backend.get("report.txt") == b"payload"
        assert storageManager.connection("local") is backend

    def testNullConnection(self, storageManager):
        backend = storageManager.connection("disabled")

        assert isinstance(backend, NullStorageBackend)
        assert backend.get("anything") is None

    def testS3Connection(self, storageManager):
        with patch("multiconn.storage.backends.s3.boto3.client") as mockBoto3:
            backend = storageManager.connection("archive")

        assert isinstance(backend, S3StorageBackend)
        assert backend.bucket == "archive"
        assert backend.prefix == "objects/"
        mockBoto3.assert_called_once_with(
            "s3",
            endpoint_url="https://storage.yandexcloud.net",
            region_name="ru-central1",
            aws_access_key_id="test-key-id",
            aws_secret_access_key="test-key-secret",
        )

    def testFilesystemWithoutBaseDir(self, storageManager):
        with pytest.raises(StorageConfigError, match="base-dir"):
            storageManager.connection("noBaseDir")

        assert "noBaseDir" not in storageManager.getConnections()

    def testS3WithoutBucket(self, storageManager):
        with pytest.raises(StorageConfigError, match="bucket"):
            storageManager.connection("noBucket")

    def testUnsupportedDriver(self, storageManager):
        with pytest.raises(UnsupportedDriverError):
            storageManager.connection("ftp")

    def testExtendWithCustomDriver(self, storageManager):
        ftpBackend = NullStorageBackend()
        storageManager.extend("ftp", lambda config, manager: ftpBackend)

        assert storageManager.connection("ftp") is ftpBackend

    def testCallsForwardedToDefaultBackend(self, storageManager):
        storageManager.store("forwarded", b"data")

        assert storageManager.exists("forwarded")
        assert storageManager.connection().get("forwarded") == b"data"

    def testReconnectKeepsStoredFiles(self, storageManager):
        storageManager.connection().store("kept", b"data")

        backend = storageManager.reconnect()

        assert backend.get("kept") == b"data"

    def testSwitchDefaultConnection(self, storageManager):
        storageManager.setDefaultConnection("disabled")

        assert isinstance(storageManager.connection(), NullStorageBackend)

    def testBackendInitFailureIsStorageError(self, storageConfig, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_bytes(b"")
        storageConfig.set("storage.connections.local.base-dir", str(blocker))
        manager = StorageManager(storageConfig)

        with pytest.raises(StorageBackendError):
            manager.connection()

    def testS3ConnectorWithoutPrefix(self, storageConfig):
        storageConfig.set("storage.connections.archive.prefix", "")
        manager = StorageManager(storageConfig)

        with patch("multiconn.storage.backends.s3.boto3.client", return_value=Mock()):
            backend = manager.connection("archive")

        assert backend.prefix == ""
