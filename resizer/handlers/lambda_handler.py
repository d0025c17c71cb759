"""AWS Lambda entry point behind an API Gateway proxy integration."""
from __future__ import annotations

import logging
from typing import Any

from resizer.services.orchestrator import handle_request
from resizer.utils.log_setup import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Resize the image named by the event path and return a proxy response."""

    path = event.get("path") or event.get("rawPath") or ""
    query = event.get("queryStringParameters") or {}
    logger.debug("Lambda event path=%s query=%s", path, query)

    return handle_request(path, query).to_proxy_response()
