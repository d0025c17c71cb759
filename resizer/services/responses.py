"""Response envelope constructors."""
from __future__ import annotations

import base64
from datetime import datetime, timezone
from email.utils import format_datetime
from http import HTTPStatus

from resizer.models import ResponseEnvelope, StoredObject

JPEG_CONTENT_TYPE = "image/jpeg"


def http_date(value: datetime) -> str:
    """Format *value* as an HTTP date (``Sun, 06 Nov 1994 08:49:37 GMT``)."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def error_response(status: int) -> ResponseEnvelope:
    status = HTTPStatus(status)
    return ResponseEnvelope(
        status_code=status.value,
        headers={"Content-Type": "text/plain"},
        body=status.phrase,
    )


def image_response(jpeg: bytes, source: StoredObject) -> ResponseEnvelope:
    headers = {"Content-Type": JPEG_CONTENT_TYPE}
    if source.cache_control is not None:
        headers["Cache-Control"] = source.cache_control
    if source.last_modified is not None:
        headers["Last-Modified"] = http_date(source.last_modified)
    if source.etag is not None:
        headers["ETag"] = source.etag

    return ResponseEnvelope(
        status_code=HTTPStatus.OK.value,
        headers=headers,
        body=base64.b64encode(jpeg).decode("ascii"),
        is_base64_encoded=True,
    )
