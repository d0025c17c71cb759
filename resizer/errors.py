"""Failure kinds raised while serving a resize request.

Each error carries a ``kind`` tag and the HTTP status it maps to. The
handler converts any of them into an error response whose body is only
the standard status phrase.
"""
from __future__ import annotations

from http import HTTPStatus


class ResizeError(Exception):
    """Base class for every failure surfaced as an error response."""

    kind: str = "ResizeError"
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.kind)
        self.message = message or self.kind

    @property
    def is_client_error(self) -> bool:
        return self.status < HTTPStatus.INTERNAL_SERVER_ERROR


class InvalidHost(ResizeError):
    kind = "InvalidHost"
    status = HTTPStatus.BAD_REQUEST


class InvalidDimensions(ResizeError):
    kind = "InvalidDimensions"
    status = HTTPStatus.BAD_REQUEST


class NotFound(ResizeError):
    kind = "NotFound"
    status = HTTPStatus.NOT_FOUND


class StorageError(ResizeError):
    kind = "StorageError"


class DecodeError(ResizeError):
    kind = "DecodeError"


class EncodeError(ResizeError):
    kind = "EncodeError"
