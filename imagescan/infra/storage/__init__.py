from imagescan.config import get_settings

from .base import BucketStorage, StorageError
from .gcs import GCSStorage

__all__ = ["BucketStorage", "GCSStorage", "StorageError", "get_storage", "set_storage"]


class _StorageHolder:
    instance: BucketStorage | None = None


def get_storage() -> BucketStorage:
    if _StorageHolder.instance is None:
        _StorageHolder.instance = GCSStorage(project=get_settings().project)
    return _StorageHolder.instance


def set_storage(storage: BucketStorage | None) -> None:
    _StorageHolder.instance = storage
