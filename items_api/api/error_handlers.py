"""Exception handler registration for the items API."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from fastapi import status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from items_api.api.transport import to_http_response
from items_api.core.errors import ApiError
from items_api.core.errors import handle_error
from items_api.core.responses import build_error
from items_api.core.responses import build_validation_error
from items_api.core.validation import ValidationErrorDetail


def _http_error_code(status_code: int) -> str:
    if status_code == status.HTTP_404_NOT_FOUND:
        return "NOT_FOUND"
    if status_code == status.HTTP_401_UNAUTHORIZED:
        return "UNAUTHORIZED"
    if status_code == status.HTTP_403_FORBIDDEN:
        return "FORBIDDEN"
    if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return "METHOD_NOT_ALLOWED"
    if status_code == status.HTTP_409_CONFLICT:
        return "CONFLICT"
    if status_code == status.HTTP_429_TOO_MANY_REQUESTS:
        return "RATE_LIMIT_EXCEEDED"
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return "INTERNAL_SERVER_ERROR"
    return "BAD_REQUEST"


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    prefixes = {"body", "query", "path", "header", "cookie"}
    filtered = [str(part) for part in location if part not in prefixes]
    if filtered:
        return ".".join(filtered)

    if not location:
        return "request"

    return str(location[0])


def _validation_details(exc: RequestValidationError) -> list[ValidationErrorDetail]:
    return [
        ValidationErrorDetail(
            field=_format_location(issue.get("loc", ())),
            message=str(issue.get("msg", "Invalid value")),
            value=issue.get("input"),
        )
        for issue in exc.errors()
    ]


async def api_error_handler(_: Request, exc: ApiError) -> Response:
    """Return typed API errors in the shared envelope."""
    return to_http_response(handle_error(exc))


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> Response:
    """Normalize FastAPI request validation errors to the validation envelope."""
    return to_http_response(build_validation_error("Request validation failed", _validation_details(exc)))


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> Response:
    """Wrap routing-level HTTP errors (unknown path, wrong method) in the envelope."""
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else "Request failed"
    proxy = build_error(_http_error_code(exc.status_code), message, exc.status_code)
    response = to_http_response(proxy)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(_: Request, exc: Exception) -> Response:
    """Classify anything else and log it."""
    return to_http_response(handle_error(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach all items API error handlers to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
