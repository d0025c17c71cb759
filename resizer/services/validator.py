"""Inbound request validation.

The first path segment names the host the image belongs to and must be an
exact member of the configured allow-list. The rest of the path, together
with the host, is the object key in the configured bucket.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Mapping, Optional

from resizer.errors import InvalidDimensions, InvalidHost
from resizer.models import ResizeRequest

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_dimension(raw: Optional[str]) -> int:
    """Parse a query-string dimension; missing, non-numeric or negative is 0."""

    if raw is None or not _INTEGER_RE.fullmatch(str(raw)):
        return 0
    return max(int(raw), 0)


def host_of(path: str) -> str:
    return path.lstrip("/").split("/", 1)[0]


def validate_request(
    path: str,
    query: Mapping[str, str] | None,
    *,
    bucket: str,
    allowed_hosts: Iterable[str],
) -> ResizeRequest:
    """Turn a request path and query parameters into a :class:`ResizeRequest`.

    Raises
    ------
    InvalidHost
        The path's host is not allow-listed.
    InvalidDimensions
        Neither width nor height is a positive integer.
    """

    query = query or {}
    width = parse_dimension(query.get("width"))
    height = parse_dimension(query.get("height"))

    host = host_of(path or "")
    if host not in set(allowed_hosts):
        raise InvalidHost(f"host {host!r} is not allowed")

    if width <= 0 and height <= 0:
        raise InvalidDimensions(f"width={query.get('width')!r} height={query.get('height')!r}")

    return ResizeRequest(
        bucket=bucket,
        object_key=path.lstrip("/"),
        width=width,
        height=height,
    )
