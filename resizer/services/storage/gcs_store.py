"""Google Cloud Storage backend for original image fetches.

Objects are looked up with ``bucket.get_blob`` so that the metadata
(cache control, update time, etag) is loaded alongside the existence
check, then downloaded into memory.
"""
from __future__ import annotations

import io
import logging
from typing import Any

from google.api_core import exceptions as gcs_exceptions
from google.cloud import storage

from resizer.config import get_settings
from resizer.errors import NotFound, StorageError
from resizer.models import StoredObject

from .base import ObjectStore

logger = logging.getLogger(__name__)


class GCSObjectStore(ObjectStore):  # pylint: disable=too-few-public-methods
    """Wrapper around Google Cloud Storage downloads."""

    name = "gcs"

    def __init__(self, client: Any | None = None) -> None:
        if client is None:
            client = storage.Client(project=get_settings().gcp_project_id)
        self._client = client

    def get_object(self, bucket: str, key: str) -> StoredObject:
        gs_path = f"gs://{bucket}/{key}"
        logger.debug("GET %s", gs_path)
        try:
            blob = self._client.bucket(bucket).get_blob(key)
            if blob is None:
                raise NotFound(f"{gs_path}: no such key")
            data = blob.download_as_bytes()
        except gcs_exceptions.NotFound as exc:
            raise NotFound(f"{gs_path}: {exc.message}") from exc
        except gcs_exceptions.GoogleAPIError as exc:
            raise StorageError(f"{gs_path}: {exc}") from exc

        return StoredObject(
            body=io.BytesIO(data),
            cache_control=blob.cache_control,
            last_modified=blob.updated,
            etag=blob.etag,
            content_type=blob.content_type,
        )
