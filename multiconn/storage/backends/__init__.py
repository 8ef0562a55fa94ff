from .abstract import AbstractStorageBackend
from .filesystem import FSStorageBackend
from .null import NullStorageBackend
from .s3 import S3StorageBackend

__all__ = [
    "AbstractStorageBackend",
    "FSStorageBackend",
    "NullStorageBackend",
    "S3StorageBackend",
]
