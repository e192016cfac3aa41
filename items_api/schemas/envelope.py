"""Wire envelopes shared by every items API response."""

from __future__ import annotations

from datetime import datetime
from datetime import timezone
import json
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SuccessEnvelope(BaseModel):
    """Body of a successful response."""

    success: Literal[True] = True
    data: Any = None
    message: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True)
        if not self.message:
            payload.pop("message")
        return payload


class ErrorEnvelope(BaseModel):
    """Body of an error response."""

    model_config = ConfigDict(populate_by_name=True)

    success: Literal[False] = False
    error: str
    message: str
    status_code: int = Field(alias="statusCode")
    timestamp: str = Field(default_factory=utc_timestamp)
    data: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ProxyResponse(BaseModel):
    """Transport-level response: status, headers and a serialized body."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    headers: dict[str, str]
    body: str

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{statusCode, headers, body}`` mapping."""
        return self.model_dump(by_alias=True)

    def json_body(self) -> Any:
        """Decode the body; None for empty bodies."""
        if not self.body:
            return None
        return json.loads(self.body)
