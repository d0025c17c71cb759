"""Request pipeline: validate, fetch, resize, encode, respond."""
from __future__ import annotations

import logging
from typing import Mapping

from resizer.config import Settings, get_settings
from resizer.errors import ResizeError
from resizer.models import ResizeRequest, ResponseEnvelope
from resizer.services.imaging import decode_image, encode_jpeg, resize_image
from resizer.services.responses import error_response, image_response
from resizer.services.storage import ObjectStore, get_store
from resizer.services.validator import validate_request

logger = logging.getLogger(__name__)


class ResizeOrchestrator:
    """Serves resize requests against one object store."""

    def __init__(self, store: ObjectStore, *, jpeg_quality: int = 95):
        self.store = store
        self.jpeg_quality = jpeg_quality

    def resize(self, request: ResizeRequest) -> ResponseEnvelope:
        """Fetch, resize and encode one object.

        Raises :class:`~resizer.errors.ResizeError` subclasses; the stored
        object's stream is closed on every path.
        """

        stored = self.store.get_object(request.bucket, request.object_key)
        with stored:
            img = decode_image(stored.body)
            resized = resize_image(img, request.width, request.height)
            jpeg = encode_jpeg(resized, quality=self.jpeg_quality)
        return image_response(jpeg, stored)


def handle_request(
    path: str,
    query: Mapping[str, str] | None,
    *,
    store: ObjectStore | None = None,
    settings: Settings | None = None,
) -> ResponseEnvelope:
    """Serve one request, converting every failure into an error envelope."""

    settings = settings or get_settings()
    try:
        request = validate_request(
            path,
            query,
            bucket=settings.bucket_name,
            allowed_hosts=settings.allowed_hosts,
        )
        orchestrator = ResizeOrchestrator(store or get_store(), jpeg_quality=settings.jpeg_quality)
        response = orchestrator.resize(request)
    except ResizeError as exc:
        if exc.is_client_error:
            logger.warning("Rejected %s: %s %s", path, exc.kind, exc.message)
        else:
            logger.error("Failed %s: %s %s", path, exc.kind, exc.message, exc_info=exc.__cause__)
        return error_response(exc.status)

    logger.info("Served %s (%dx%d)", path, request.width, request.height)
    return response
