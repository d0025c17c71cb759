"""Shared fixtures: settings, an in-memory object store and test images."""
from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest
from PIL import Image

from resizer.config import Settings
from resizer.errors import NotFound
from resizer.models import StoredObject
from resizer.services.storage import ObjectStore

ALLOWED_HOST = "images.story.io"
LAST_MODIFIED = datetime(2024, 3, 5, 14, 30, 0, tzinfo=timezone.utc)


def make_image_bytes(width: int, height: int, fmt: str = "PNG", mode: str = "RGB") -> bytes:
    color = (200, 40, 40, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 128
    img = Image.new(mode, (width, height), color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


class FakeStore(ObjectStore):
    """In-memory store that records every fetch and every stream it hands out."""

    name = "fake"

    def __init__(self, objects: dict[str, bytes] | None = None, error: Exception | None = None):
        self.objects = objects or {}
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.streams: list[io.BytesIO] = []

    def get_object(self, bucket: str, key: str) -> StoredObject:
        self.calls.append((bucket, key))
        if self.error is not None:
            raise self.error
        if key not in self.objects:
            raise NotFound(f"{bucket}/{key}")
        stream = io.BytesIO(self.objects[key])
        self.streams.append(stream)
        return StoredObject(
            body=stream,
            cache_control="public, max-age=86400",
            last_modified=LAST_MODIFIED,
            etag='"abc123"',
            content_type="image/png",
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        storage_backend="s3",
        bucket_name="test-bucket",
        allowed_hosts=[ALLOWED_HOST],
        jpeg_quality=90,
        log_level="DEBUG",
    )


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def patched_pipeline(monkeypatch, settings, fake_store):
    """Route entry points through the fake store and test settings."""

    from resizer.services import orchestrator

    monkeypatch.setattr(orchestrator, "get_settings", lambda: settings)
    monkeypatch.setattr(orchestrator, "get_store", lambda: fake_store)
    return fake_store
