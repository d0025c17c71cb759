from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """HTTP-style response returned by every invocation.

    Serialises to the API Gateway proxy integration shape with
    :meth:`to_proxy_response`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""
    is_base64_encoded: bool = Field(False, alias="isBase64Encoded")

    def to_proxy_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
