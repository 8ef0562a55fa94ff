"""
S3 storage backend implementation

Storage backend for AWS S3 and S3-compatible services built on boto3.
"""

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import StorageBackendError
from ..utils import sanitizeKey
from .abstract import AbstractStorageBackend

NOT_FOUND_CODES = ("404", "NoSuchKey", "NotFound")


def isNotFound(error: ClientError) -> bool:
    """Check whether a boto3 client error means the object does not exist."""
    return error.response.get("Error", {}).get("Code") in NOT_FOUND_CODES


class S3StorageBackend(AbstractStorageBackend):
    """
    S3-based storage backend using boto3.

    All keys are sanitized and prefixed with the configured prefix.
    Missing objects return None/False instead of raising.

    Args:
        endpoint: S3 endpoint URL (e.g., "https://s3.amazonaws.com")
        region: AWS region (e.g., "us-east-1", "ru-central1")
        keyId: AWS access key ID
        keySecret: AWS secret access key
        bucket: S3 bucket name
        prefix: Optional prefix for all keys (default: "")

    Raises:
        StorageBackendError: If S3 client initialization fails
    """

    def __init__(self, endpoint: str, region: str, keyId: str, keySecret: str, bucket: str, prefix: str = ""):
        self.bucket = bucket
        self.prefix = prefix

        try:
            self.client = boto3.client(
                "s3",
                endpoint_url=endpoint,
                region_name=region,
                aws_access_key_id=keyId,
                aws_secret_access_key=keySecret,
            )
        except (BotoCoreError, ValueError) as e:
            raise StorageBackendError(f"Failed to initialize S3 client: {e}", originalError=e)

    def _getS3Key(self, key: str) -> str:
        return f"{self.prefix}{sanitizeKey(key)}"

    def store(self, key: str, data: bytes) -> None:
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=self._getS3Key(key),
                Body=data,
                ContentType="application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageBackendError(f"Failed to store object with key '{key}' to S3: {e}", originalError=e)

    def get(self, key: str) -> bytes | None:
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=self._getS3Key(key))
            return response["Body"].read()
        except ClientError as e:
            if isNotFound(e):
                return None
            raise StorageBackendError(f"Failed to get object with key '{key}' from S3: {e}", originalError=e)
        except BotoCoreError as e:
            raise StorageBackendError(f"Failed to get object with key '{key}' from S3: {e}", originalError=e)

    def exists(self, key: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=self._getS3Key(key))
            return True
        except ClientError as e:
            if isNotFound(e):
                return False
            raise StorageBackendError(f"Failed to check existence of key '{key}' in S3: {e}", originalError=e)
        except BotoCoreError as e:
            raise StorageBackendError(f"Failed to check existence of key '{key}' in S3: {e}", originalError=e)

    def delete(self, key: str) -> bool:
        # S3 deletes are idempotent, check first to report missing objects
        if not self.exists(key):
            return False

        try:
            self.client.delete_object(Bucket=self.bucket, Key=self._getS3Key(key))
            return True
        except (BotoCoreError, ClientError) as e:
            raise StorageBackendError(f"Failed to delete object with key '{key}' from S3: {e}", originalError=e)
