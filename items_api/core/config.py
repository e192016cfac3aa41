"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import asdict
from dataclasses import dataclass
from functools import lru_cache
import logging
import os

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LIST_LIMIT = 10
DEFAULT_MAX_LIST_LIMIT = 100
DEFAULT_EXPOSE_INTERNAL_ERRORS = True

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    return int(raw)


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class ApiSettings:
    """Runtime settings for the items API."""

    log_level: str
    default_list_limit: int
    max_list_limit: int
    expose_internal_errors: bool

    def safe_for_logging(self) -> dict[str, str | int | bool]:
        """Return settings as a plain mapping for log lines."""
        return asdict(self)


@lru_cache(maxsize=1)
def get_settings() -> ApiSettings:
    """Load API settings from the environment."""
    settings = ApiSettings(
        log_level=os.getenv("ITEMS_API_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        default_list_limit=_get_int_env("ITEMS_API_DEFAULT_LIMIT", DEFAULT_LIST_LIMIT),
        max_list_limit=_get_int_env("ITEMS_API_MAX_LIMIT", DEFAULT_MAX_LIST_LIMIT),
        expose_internal_errors=_get_bool_env("ITEMS_API_EXPOSE_INTERNAL_ERRORS", DEFAULT_EXPOSE_INTERNAL_ERRORS),
    )
    if settings.max_list_limit < 1:
        raise ValueError("ITEMS_API_MAX_LIMIT must be >= 1")
    if not 1 <= settings.default_list_limit <= settings.max_list_limit:
        raise ValueError("ITEMS_API_DEFAULT_LIMIT must be between 1 and ITEMS_API_MAX_LIMIT")
    return settings


def configure_logging(settings: ApiSettings | None = None) -> None:
    """Set the root log level and a plain line format."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
