"""Helpers for pulling typed values out of raw request parts."""

from __future__ import annotations

import json
from typing import Any

from items_api.core.errors import BadRequestError
from items_api.validators.items import parse_int_prefix


def parse_json_body(raw: bytes | str | None) -> Any:
    """Decode a JSON request body or raise ``BadRequestError``."""
    if not raw:
        raise BadRequestError("Request body is required")
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise BadRequestError("Invalid JSON format") from exc


def parse_integer(
    value: str | None,
    default: int = 0,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Parse an integer query value, falling back to ``default`` and clamping to bounds."""
    if not value:
        return default
    parsed = parse_int_prefix(value)
    if parsed is None:
        return default
    if minimum is not None and parsed < minimum:
        return minimum
    if maximum is not None and parsed > maximum:
        return maximum
    return parsed
