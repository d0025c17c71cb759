from __future__ import annotations

from functools import lru_cache

from resizer.config import get_settings

from .base import ObjectStore
from .gcs_store import GCSObjectStore
from .s3_store import S3ObjectStore

_STORES: dict[str, type[ObjectStore]] = {
    "s3": S3ObjectStore,
    "gcs": GCSObjectStore,
}


@lru_cache()
def get_store() -> ObjectStore:
    settings = get_settings()
    store_key = settings.storage_backend.lower()
    if store_key not in _STORES:
        raise ValueError(f"Unsupported storage backend: {store_key}")
    return _STORES[store_key]()
