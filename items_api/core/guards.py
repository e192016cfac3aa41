"""Primitive type predicates used by the validation layer."""

from __future__ import annotations

from collections.abc import Mapping
import math
import re
from typing import Any

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Return True for real ints and floats, excluding bools and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_defined(value: Any) -> bool:
    return value is not None


def is_non_empty_string(value: Any) -> bool:
    return is_string(value) and len(value.strip()) > 0


def is_uuid(value: Any) -> bool:
    return is_string(value) and UUID_PATTERN.fullmatch(value) is not None
