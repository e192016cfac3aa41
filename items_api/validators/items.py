"""Fixed validation schemas for the items endpoints."""

from __future__ import annotations

import re
from typing import Any

from items_api.core.guards import is_defined
from items_api.core.guards import is_non_empty_string
from items_api.core.guards import is_string
from items_api.core.validation import CheckOutcome
from items_api.core.validation import ValidationErrorDetail
from items_api.core.validation import ValidationResult
from items_api.core.validation import ValidationRule
from items_api.core.validation import ValidationSchema
from items_api.core.validation import check
from items_api.core.validation import validate

ITEM_STATUSES = ("active", "inactive")
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
LIST_LIMIT_MIN = 1
LIST_LIMIT_MAX = 100

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int_prefix(raw: str) -> int | None:
    """Parse the leading base-10 integer of ``raw``; None when there is none."""
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _non_empty(message: str):
    def _check(value: Any) -> CheckOutcome:
        return check(is_non_empty_string(value), message)

    return _check


def _limit_in_range(value: str) -> CheckOutcome:
    parsed = parse_int_prefix(value)
    return check(
        parsed is not None and LIST_LIMIT_MIN <= parsed <= LIST_LIMIT_MAX,
        f"Limit must be a number between {LIST_LIMIT_MIN} and {LIST_LIMIT_MAX}",
    )


def _offset_non_negative(value: str) -> CheckOutcome:
    parsed = parse_int_prefix(value)
    return check(parsed is not None and parsed >= 0, "Offset must be a non-negative number")


# The one-character minimum on name/description is covered by the non-empty
# check, so blank input reports a single "cannot be empty" error.
CREATE_ITEM_SCHEMA = ValidationSchema(
    rules=(
        ValidationRule(
            field="name",
            required=True,
            type="string",
            max_length=NAME_MAX_LENGTH,
            custom=_non_empty("Name cannot be empty"),
        ),
        ValidationRule(
            field="description",
            required=True,
            type="string",
            max_length=DESCRIPTION_MAX_LENGTH,
            custom=_non_empty("Description cannot be empty"),
        ),
    ),
    strict=True,
)

UPDATE_ITEM_SCHEMA = ValidationSchema(
    rules=(
        ValidationRule(
            field="name",
            type="string",
            max_length=NAME_MAX_LENGTH,
            custom=_non_empty("Name cannot be empty"),
        ),
        ValidationRule(
            field="description",
            type="string",
            max_length=DESCRIPTION_MAX_LENGTH,
            custom=_non_empty("Description cannot be empty"),
        ),
        ValidationRule(field="status", type="string", enum=ITEM_STATUSES),
    ),
    strict=True,
)

# Non-strict: list queries may carry extra parameters (sort, filter) that are ignored.
LIST_QUERY_SCHEMA = ValidationSchema(
    rules=(
        ValidationRule(field="limit", type="string", custom=_limit_in_range),
        ValidationRule(field="offset", type="string", custom=_offset_non_negative),
        ValidationRule(field="status", type="string", enum=ITEM_STATUSES),
    ),
    strict=False,
)


def validate_create_request(data: Any) -> ValidationResult:
    """Validate a create-item body."""
    return validate(data, CREATE_ITEM_SCHEMA)


def validate_update_request(data: Any) -> ValidationResult:
    """Validate a partial update body; an empty mapping is valid."""
    return validate(data, UPDATE_ITEM_SCHEMA)


def validate_list_query(params: Any) -> ValidationResult:
    """Validate list query parameters; a missing parameter bag counts as empty."""
    return validate(params if params is not None else {}, LIST_QUERY_SCHEMA)


def validate_id_parameter(item_id: Any) -> ValidationResult:
    """Validate a bare item id path parameter.

    This validates a scalar rather than a mapping, so it is written out by hand
    instead of going through a one-rule schema. Only the first failing check is
    reported.
    """
    message = None
    if not is_defined(item_id):
        message = "Item ID is required"
    elif not is_string(item_id):
        message = "Item ID must be a string"
    elif not is_non_empty_string(item_id):
        message = "Item ID cannot be empty"

    if message is None:
        return ValidationResult()
    return ValidationResult(errors=[ValidationErrorDetail(field="id", message=message, value=item_id)])
