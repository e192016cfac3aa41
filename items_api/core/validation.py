"""Rule-driven field and schema validation.

A ``ValidationSchema`` is an ordered tuple of ``ValidationRule`` objects plus a
strictness flag. ``validate`` applies every rule to the matching key of a
mapping and returns a ``ValidationResult`` listing every failure, in rule
order. Nothing here raises on bad input; callers decide what to do with the
collected errors (see ``items_api.core.errors.create_validation_error``).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import re
from typing import Any
from typing import Literal
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from items_api.core.guards import is_array
from items_api.core.guards import is_boolean
from items_api.core.guards import is_defined
from items_api.core.guards import is_number
from items_api.core.guards import is_object
from items_api.core.guards import is_string

RuleType = Literal["string", "number", "boolean", "array", "object"]

_TYPE_GUARDS: dict[str, Callable[[Any], bool]] = {
    "string": is_string,
    "number": is_number,
    "boolean": is_boolean,
    "array": is_array,
    "object": is_object,
}


@dataclass(frozen=True)
class Passed:
    """Custom check outcome for an accepted value."""


@dataclass(frozen=True)
class Failed:
    """Custom check outcome for a rejected value, with an optional message."""

    message: str | None = None


CheckOutcome = Union[Passed, Failed]
CustomCheck = Callable[[Any], Any]


def check(condition: bool, message: str | None = None) -> CheckOutcome:
    """Turn a boolean condition into a ``Passed``/``Failed`` outcome."""
    if condition:
        return Passed()
    return Failed(message)


def _coerce_outcome(result: Any) -> CheckOutcome:
    # Literal True passes; a bare string is a failure message.
    if isinstance(result, (Passed, Failed)):
        return result
    if result is True:
        return Passed()
    if isinstance(result, str):
        return Failed(result)
    return Failed()


@dataclass(frozen=True)
class ValidationRule:
    """Declarative constraints for one field."""

    field: str
    required: bool = False
    type: RuleType | None = None
    min_length: int | None = None
    max_length: int | None = None
    min: float | None = None
    max: float | None = None
    pattern: re.Pattern[str] | str | None = None
    enum: tuple[Any, ...] | None = None
    custom: CustomCheck | None = None

    def __post_init__(self) -> None:
        if self.type is not None and self.type not in _TYPE_GUARDS:
            raise ValueError(f"Unsupported rule type: {self.type}")
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))
        if self.enum is not None and not isinstance(self.enum, tuple):
            object.__setattr__(self, "enum", tuple(self.enum))


@dataclass(frozen=True)
class ValidationSchema:
    """Ordered rules applied to a mapping; ``strict`` rejects unnamed keys."""

    rules: tuple[ValidationRule, ...]
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))

    @property
    def fields(self) -> frozenset[str]:
        return frozenset(rule.field for rule in self.rules)


class ValidationErrorDetail(BaseModel):
    """Single field-level validation failure."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    value: Any = None


class ValidationResult(BaseModel):
    """Outcome of one validation run."""

    model_config = ConfigDict(frozen=True)

    errors: list[ValidationErrorDetail] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _in_enum(value: Any, options: tuple[Any, ...]) -> bool:
    # Exact match: True never equals 1 and 1.0 never equals 1.
    return any(type(value) is type(option) and value == option for option in options)


def _detail(rule: ValidationRule, message: str, value: Any) -> ValidationErrorDetail:
    return ValidationErrorDetail(field=rule.field, message=message, value=value)


def validate_field(value: Any, rule: ValidationRule) -> list[ValidationErrorDetail]:
    """Apply one rule to one value and return every failure found.

    Absent values and type mismatches short-circuit with at most one error.
    Once the type check passes, length, pattern, range, enum and custom checks
    all run and their errors accumulate.
    """
    if not is_defined(value):
        if rule.required:
            return [_detail(rule, f"{rule.field} is required", value)]
        return []

    if rule.type is not None and not _TYPE_GUARDS[rule.type](value):
        return [_detail(rule, f"{rule.field} must be of type {rule.type}", value)]

    errors: list[ValidationErrorDetail] = []

    if is_string(value):
        if rule.min_length is not None and len(value) < rule.min_length:
            errors.append(_detail(rule, f"{rule.field} must be at least {rule.min_length} characters long", value))
        if rule.max_length is not None and len(value) > rule.max_length:
            errors.append(_detail(rule, f"{rule.field} must be no more than {rule.max_length} characters long", value))
        if rule.pattern is not None and rule.pattern.search(value) is None:
            errors.append(_detail(rule, f"{rule.field} format is invalid", value))

    if is_number(value):
        if rule.min is not None and value < rule.min:
            errors.append(_detail(rule, f"{rule.field} must be at least {rule.min}", value))
        if rule.max is not None and value > rule.max:
            errors.append(_detail(rule, f"{rule.field} must be no more than {rule.max}", value))

    if rule.enum is not None and not _in_enum(value, rule.enum):
        allowed = ", ".join(str(option) for option in rule.enum)
        errors.append(_detail(rule, f"{rule.field} must be one of: {allowed}", value))

    if rule.custom is not None:
        outcome = _coerce_outcome(rule.custom(value))
        if isinstance(outcome, Failed):
            message = outcome.message if outcome.message is not None else f"{rule.field} is invalid"
            errors.append(_detail(rule, message, value))

    return errors


def validate(data: Any, schema: ValidationSchema) -> ValidationResult:
    """Validate a mapping against a schema, collecting all field errors."""
    if not is_object(data):
        return ValidationResult(
            errors=[ValidationErrorDetail(field="root", message="Data must be an object", value=data)]
        )

    errors: list[ValidationErrorDetail] = []
    for rule in schema.rules:
        errors.extend(validate_field(data.get(rule.field), rule))

    if schema.strict:
        known = schema.fields
        for key in data:
            if key not in known:
                errors.append(ValidationErrorDetail(field=str(key), message=f"Unknown field: {key}", value=data[key]))

    return ValidationResult(errors=errors)

