"""HTTP route serving resized images directly."""
from __future__ import annotations

import base64
import logging

from fastapi import APIRouter, Request, Response

from resizer.services.orchestrator import handle_request

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/{object_path:path}")
def get_image(object_path: str, request: Request) -> Response:
    envelope = handle_request(f"/{object_path}", dict(request.query_params))
    content = base64.b64decode(envelope.body) if envelope.is_base64_encoded else envelope.body.encode()
    headers = {k: v for k, v in envelope.headers.items() if k.lower() != "content-type"}
    return Response(
        content=content,
        status_code=envelope.status_code,
        headers=headers,
        media_type=envelope.headers.get("Content-Type"),
    )
