from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class StoredObject(BaseModel):
    """Object body stream plus the metadata propagated to the response.

    The stream is owned by whoever fetched the object and must be closed
    once read; use the object as a context manager.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    body: Any  # binary file-like stream
    cache_control: str | None = None
    last_modified: datetime | None = None
    etag: str | None = None
    content_type: str | None = None

    def read(self) -> bytes:
        return self.body.read()

    def close(self) -> None:
        self.body.close()

    def __enter__(self) -> StoredObject:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
