"""Builders for API Gateway style proxy responses.

Every builder returns a ``ProxyResponse`` whose body is a JSON string in the
shared envelope, with JSON and permissive CORS headers attached.
"""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
import json
from typing import Any

from pydantic import BaseModel

from items_api.core.validation import ValidationErrorDetail
from items_api.schemas.envelope import ErrorEnvelope
from items_api.schemas.envelope import ProxyResponse
from items_api.schemas.envelope import SuccessEnvelope

HTTP_200_OK = 200
HTTP_201_CREATED = 201
HTTP_204_NO_CONTENT = 204
HTTP_400_BAD_REQUEST = 400
HTTP_401_UNAUTHORIZED = 401
HTTP_404_NOT_FOUND = 404
HTTP_429_TOO_MANY_REQUESTS = 429
HTTP_500_INTERNAL_SERVER_ERROR = 500

CORS_HEADERS: Mapping[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",
}

DEFAULT_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/json",
    **CORS_HEADERS,
}


def _serialize(body: Any) -> str:
    if isinstance(body, str):
        return body
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True)
    return json.dumps(body)


def build_response(
    status_code: int,
    body: Any,
    headers: Mapping[str, str] | None = None,
) -> ProxyResponse:
    """Wrap a body in a response with the default headers; ``headers`` override them."""
    merged = {**DEFAULT_HEADERS, **(headers or {})}
    return ProxyResponse(status_code=status_code, headers=merged, body=_serialize(body))


def build_success(data: Any, message: str | None = None, status_code: int = HTTP_200_OK) -> ProxyResponse:
    """Build ``{success: true, data, message?}``."""
    envelope = SuccessEnvelope(data=data, message=message)
    return build_response(status_code, envelope.to_payload())


def build_error(code: str, message: str, status_code: int = HTTP_500_INTERNAL_SERVER_ERROR) -> ProxyResponse:
    """Build ``{success: false, error, message, statusCode, timestamp}``."""
    envelope = ErrorEnvelope(error=code, message=message, status_code=status_code)
    return build_response(status_code, envelope.to_payload())


def build_validation_error(
    message: str,
    errors: Sequence[ValidationErrorDetail] | None = None,
) -> ProxyResponse:
    """Build a 400 validation error, listing field errors under ``data.errors``."""
    data = None
    if errors:
        data = {"errors": [detail.model_dump(mode="json") for detail in errors]}
    envelope = ErrorEnvelope(
        error="VALIDATION_ERROR",
        message=message,
        status_code=HTTP_400_BAD_REQUEST,
        data=data,
    )
    return build_response(HTTP_400_BAD_REQUEST, envelope.to_payload())


def build_created(data: Any, message: str | None = None) -> ProxyResponse:
    return build_success(data, message, HTTP_201_CREATED)


def build_no_content() -> ProxyResponse:
    """Build a bodiless 204; the body is an empty string."""
    return ProxyResponse(status_code=HTTP_204_NO_CONTENT, headers=dict(CORS_HEADERS), body="")


def build_options() -> ProxyResponse:
    """Build a CORS preflight response."""
    return ProxyResponse(status_code=HTTP_200_OK, headers=dict(CORS_HEADERS), body="")


def build_not_found(message: str = "Resource not found") -> ProxyResponse:
    return build_error("NOT_FOUND", message, HTTP_404_NOT_FOUND)


def build_rate_limited(message: str = "Rate limit exceeded") -> ProxyResponse:
    return build_error("RATE_LIMIT_EXCEEDED", message, HTTP_429_TOO_MANY_REQUESTS)


def build_unauthorized(message: str = "Unauthorized access") -> ProxyResponse:
    return build_error("UNAUTHORIZED", message, HTTP_401_UNAUTHORIZED)
