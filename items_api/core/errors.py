"""Typed API errors, generic error classification and handling helpers."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterable
import functools
import logging
from typing import Any
from typing import TypeVar

from items_api.core.config import get_settings
from items_api.core.responses import build_error
from items_api.core.validation import ValidationErrorDetail
from items_api.schemas.envelope import ProxyResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

T = TypeVar("T")


class ApiError(Exception):
    """Base application exception carrying a status code and machine-readable code.

    Subclasses fix ``status_code``, ``code`` and ``default_message`` at class level.
    """

    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def to_response(self) -> ProxyResponse:
        """Render this error as an error envelope response."""
        return build_error(self.code, self.message, self.status_code)


class ValidationError(ApiError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Invalid input data"


class BadRequestError(ApiError):
    status_code = 400
    code = "BAD_REQUEST"
    default_message = "Bad request"


class UnauthorizedError(ApiError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Unauthorized access"


class ForbiddenError(ApiError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "Access forbidden"


class NotFoundError(ApiError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"


class ConflictError(ApiError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Resource conflict"


class RateLimitError(ApiError):
    status_code = 429
    code = "RATE_LIMIT_EXCEEDED"
    default_message = "Rate limit exceeded"


class InternalServerError(ApiError):
    status_code = 500
    code = "INTERNAL_SERVER_ERROR"
    default_message = "Internal server error"


# Checked in order; a message matching several entries takes the first.
_KEYWORD_CLASSES: tuple[tuple[tuple[str, ...], type[ApiError]], ...] = (
    (("validation", "invalid"), ValidationError),
    (("not found", "does not exist"), NotFoundError),
    (("unauthorized", "authentication"), UnauthorizedError),
    (("forbidden", "permission"), ForbiddenError),
    (("conflict", "already exists"), ConflictError),
    (("rate limit", "throttle"), RateLimitError),
)


def classify(error: object, *, expose_internal: bool | None = None) -> ApiError:
    """Map any raised value onto the error taxonomy.

    ``ApiError`` instances pass through. Other exceptions are matched on
    keywords in their lowercased message; this is a substring heuristic, so
    "permission conflict" classifies as forbidden because that check comes
    first. Unmatched exceptions become ``InternalServerError``, echoing the
    original message unless ``expose_internal`` is False.
    """
    if isinstance(error, ApiError):
        return error

    if not isinstance(error, BaseException):
        return InternalServerError(GENERIC_ERROR_MESSAGE)

    message = str(error)
    lowered = message.lower()
    for keywords, error_class in _KEYWORD_CLASSES:
        if any(keyword in lowered for keyword in keywords):
            return error_class(message)

    if expose_internal is None:
        expose_internal = get_settings().expose_internal_errors
    if expose_internal:
        return InternalServerError(f"Internal server error: {message}")
    return InternalServerError(GENERIC_ERROR_MESSAGE)


def handle_error(error: object) -> ProxyResponse:
    """Log an error and convert it into an error envelope response."""
    api_error = classify(error)
    if api_error is error:
        logger.warning("Request failed with %s: %s", api_error.code, api_error.message)
    elif isinstance(error, BaseException):
        logger.error("Unhandled error classified as %s", api_error.code, exc_info=error)
    else:
        logger.error("Unhandled non-exception error %r classified as %s", error, api_error.code)
    return api_error.to_response()


def with_error_handling(handler: Callable[..., T]) -> Callable[..., T | ProxyResponse]:
    """Decorate a handler so raised exceptions come back as error responses."""

    @functools.wraps(handler)
    def wrapper(*args: Any, **kwargs: Any) -> T | ProxyResponse:
        try:
            return handler(*args, **kwargs)
        except Exception as exc:
            return handle_error(exc)

    return wrapper


def create_validation_error(errors: Iterable[ValidationErrorDetail]) -> ValidationError:
    """Fold field errors into one ``ValidationError``, keeping their order."""
    messages = [f"{detail.field}: {detail.message}" for detail in errors]
    return ValidationError(f"Validation failed: {', '.join(messages)}")


def ensure(condition: bool, error: ApiError) -> None:
    """Raise ``error`` unless ``condition`` holds."""
    if not condition:
        raise error


def assert_exists(value: T | None, message: str | None = None) -> T:
    """Return ``value`` or raise ``NotFoundError`` when it is None."""
    if value is None:
        raise NotFoundError(message or NotFoundError.default_message)
    return value


def assert_valid(condition: bool, message: str) -> None:
    """Raise ``ValidationError`` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise ValidationError(message)
