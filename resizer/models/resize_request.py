from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResizeRequest(BaseModel):
    """A validated request for one resized object."""

    model_config = ConfigDict(frozen=True)

    bucket: str
    object_key: str
    width: int = Field(0, ge=0)  # 0 means "not supplied"
    height: int = Field(0, ge=0)
