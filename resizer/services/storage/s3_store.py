"""Amazon S3 backend for original image fetches."""
from __future__ import annotations

import io
import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from resizer.config import get_settings
from resizer.errors import NotFound, StorageError
from resizer.models import StoredObject

from .base import ObjectStore

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"NoSuchBucket", "NoSuchKey", "404"})


class S3ObjectStore(ObjectStore):
    """Reads objects with a single shared boto3 S3 client."""

    name = "s3"

    def __init__(self, client: Any | None = None) -> None:
        if client is None:
            settings = get_settings()
            client = boto3.client("s3", region_name=settings.aws_region)
        self._client = client

    def get_object(self, bucket: str, key: str) -> StoredObject:
        logger.debug("GET s3://%s/%s", bucket, key)
        try:
            resp = self._client.get_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in _NOT_FOUND_CODES:
                raise NotFound(f"s3://{bucket}/{key}: {code}") from exc
            raise StorageError(f"s3://{bucket}/{key}: {code or exc}") from exc
        except BotoCoreError as exc:
            raise StorageError(f"s3://{bucket}/{key}: {exc}") from exc

        # Read the body here so mid-stream failures surface as storage faults
        body = resp["Body"]
        try:
            data = body.read()
        except BotoCoreError as exc:
            raise StorageError(f"s3://{bucket}/{key}: {exc}") from exc
        finally:
            body.close()

        return StoredObject(
            body=io.BytesIO(data),
            cache_control=resp.get("CacheControl"),
            last_modified=resp.get("LastModified"),
            etag=resp.get("ETag"),
            content_type=resp.get("ContentType"),
        )
