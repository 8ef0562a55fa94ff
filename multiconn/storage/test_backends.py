"""
Tests for storage backends and key sanitization, dood!
"""

import io
from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError

from .backends import FSStorageBackend, NullStorageBackend, S3StorageBackend
from .exceptions import StorageBackendError, StorageKeyError
from .utils import MAX_KEY_LENGTH, sanitizeKey

# ============================================================================
# Key Sanitization
# ============================================================================


class TestSanitizeKey:
    """Test sanitizeKey(), dood!"""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("valid-key.txt", "valid-key.txt"),
            ("../../../etc/passwd", "etc_passwd"),
            ("file/with/slashes", "file_with_slashes"),
            ("back\\slash", "back_slash"),
            ("  .hidden_ ", "hidden"),
            ("bad\x00chars\x1f!", "badchars"),
        ],
    )
    def testSanitize(self, key, expected):
        assert sanitizeKey(key) == expected

    @pytest.mark.parametrize("key", ["", "   ", "...", "!!!"])
    def testInvalidKeys(self, key):
        with pytest.raises(StorageKeyError):
            sanitizeKey(key)

    def testTooLong(self):
        with pytest.raises(StorageKeyError):
            sanitizeKey("a" * (MAX_KEY_LENGTH + 1))

    def testMaxLength(self):
        assert sanitizeKey("a" * MAX_KEY_LENGTH) == "a" * MAX_KEY_LENGTH


# ============================================================================
# Null Backend
# ============================================================================


class TestNullBackend:
    """Test NullStorageBackend, dood!"""

    def testOperationsAreNoop(self):
        backend = NullStorageBackend()

        backend.store("key", b"data")

        assert backend.get("key") is None
        assert backend.exists("key") is False
        assert backend.delete("key") is False

    def testValidatesKeys(self):
        with pytest.raises(StorageKeyError):
            NullStorageBackend().store("", b"data")


# ============================================================================
# Filesystem Backend
# ============================================================================


class TestFSBackend:
    """Test FSStorageBackend, dood!"""

    def testStoreAndGet(self, tmp_path):
        backend = FSStorageBackend(str(tmp_path))

        backend.store("key", b"data")

        assert backend.get("key") == b"data"
        assert backend.exists("key")
        assert not (tmp_path / "key.tmp").exists()

    def testOverwrite(self, tmp_path):
        backend = FSStorageBackend(str(tmp_path))

        backend.store("key", b"old")
        backend.store("key", b"new")

        assert backend.get("key") == b"new"

    def testMissingKey(self, tmp_path):
        backend = FSStorageBackend(str(tmp_path))

        assert backend.get("missing") is None
        assert backend.exists("missing") is False
        assert backend.delete("missing") is False

    def testDelete(self, tmp_path):
        backend = FSStorageBackend(str(tmp_path))
        backend.store("key", b"data")

        assert backend.delete("key") is True
        assert backend.exists("key") is False

    def testPathTraversalStaysInBaseDir(self, tmp_path):
        backend = FSStorageBackend(str(tmp_path / "objects"))

        backend.store("../escape", b"data")

        assert (tmp_path / "objects" / "escape").is_file()
        assert not (tmp_path / "escape").exists()

    def testCreatesBaseDir(self, tmp_path):
        FSStorageBackend(str(tmp_path / "a" / "b"))

        assert (tmp_path / "a" / "b").is_dir()

    def testBaseDirIsFile(self, tmp_path):
        filePath = tmp_path / "file"
        filePath.write_bytes(b"")

        with pytest.raises(StorageBackendError):
            FSStorageBackend(str(filePath))


# ============================================================================
# S3 Backend
# ============================================================================


def clientError(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "operation")


@pytest.fixture
def mockS3Client():
    """Create a mock boto3 S3 client, dood!"""
    return Mock()


@pytest.fixture
def s3Backend(mockS3Client):
    """Create S3StorageBackend with mocked boto3 client, dood!"""
    with patch("multiconn.storage.backends.s3.boto3.client", return_value=mockS3Client):
        return S3StorageBackend(
            endpoint="https://s3.amazonaws.com",
            region="us-east-1",
            keyId="test-key-id",
            keySecret="test-key-secret",
            bucket="test-bucket",
            prefix="test-prefix/",
        )


class TestS3Backend:
    """Test S3StorageBackend with mocked client, dood!"""

    def testStore(self, s3Backend, mockS3Client):
        s3Backend.store("key", b"data")

        mockS3Client.put_object.assert_called_once_with(
            Bucket="test-bucket",
            Key="test-prefix/key",
            Body=b"data",
            ContentType="application/octet-stream",
        )

    def testGet(self, s3Backend, mockS3Client):
        mockS3Client.get_object.return_value = {"Body": io.BytesIO(b"data")}

        assert s3Backend.get("key") == b"data"
        mockS3Client.get_object.assert_called_once_with(Bucket="test-bucket", Key="test-prefix/key")

    def testGetMissing(self, s3Backend, mockS3Client):
        mockS3Client.get_object.side_effect = clientError("NoSuchKey")

        assert s3Backend.get("key") is None

    def testGetFailure(self, s3Backend, mockS3Client):
        error = clientError("AccessDenied")
        mockS3Client.get_object.side_effect = error

        with pytest.raises(StorageBackendError) as excInfo:
            s3Backend.get("key")

        assert excInfo.value.originalError is error

    def testExists(self, s3Backend, mockS3Client):
        assert s3Backend.exists("key") is True

        mockS3Client.head_object.side_effect = clientError("404")

        assert s3Backend.exists("key") is False

    def testDelete(self, s3Backend, mockS3Client):
        assert s3Backend.delete("key") is True

        mockS3Client.delete_object.assert_called_once_with(Bucket="test-bucket", Key="test-prefix/key")

    def testDeleteMissing(self, s3Backend, mockS3Client):
        mockS3Client.head_object.side_effect = clientError("404")

        assert s3Backend.delete("key") is False
        mockS3Client.delete_object.assert_not_called()

    def testStoreFailure(self, s3Backend, mockS3Client):
        mockS3Client.put_object.side_effect = clientError("InternalError")

        with pytest.raises(StorageBackendError):
            s3Backend.store("key", b"data")
