"""Composable request validation.

A rule is a plain callable taking ``(value, key, body)`` and returning a
``ValidationIssue`` or ``None``. Property rules run against a single field when
it is present; schema rules run against the whole body every time. Every rule
runs, so callers get the full list of problems in one pass.
"""
from __future__ import annotations

import enum
import math
from dataclasses import asdict, dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence


class ErrorCode(str, enum.Enum):
    TYPE_ERROR = "TYPE_ERROR"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    MISSING_FIELD = "MISSING_FIELD"


@dataclass(slots=True)
class ValidationIssue:
    field: str | None
    message: str
    error_code: str

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


ValidationRule = Callable[[Any, str | None, Mapping[str, Any]], ValidationIssue | None]


def is_number(value: Any) -> bool:
    """True for ints and floats, excluding bools and NaN."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _type_error(key: str | None) -> ValidationIssue:
    return ValidationIssue(field=key, message=f"{key} must be a number", error_code=ErrorCode.TYPE_ERROR.value)


def in_number_array(allowed: Iterable[float]) -> ValidationRule:
    """Accept only numeric values that appear in ``allowed``."""

    choices = tuple(allowed)

    def _rule(value: Any, key: str | None, _body: Mapping[str, Any]) -> ValidationIssue | None:
        if not is_number(value):
            return _type_error(key)
        if value not in choices:
            options = ", ".join(str(choice) for choice in choices)
            return ValidationIssue(
                field=key,
                message=f"{key} must be one of: {options}",
                error_code=ErrorCode.OUT_OF_BOUNDS.value,
            )
        return None

    return _rule


def is_between(minimum: float, maximum: float) -> ValidationRule:
    """Accept numeric values within ``minimum..maximum`` inclusive."""

    def _rule(value: Any, key: str | None, _body: Mapping[str, Any]) -> ValidationIssue | None:
        if not is_number(value):
            return _type_error(key)
        if not minimum <= value <= maximum:
            return ValidationIssue(
                field=key,
                message=f"{key} must be between {minimum} and {maximum}",
                error_code=ErrorCode.OUT_OF_BOUNDS.value,
            )
        return None

    return _rule


def is_required_all_or_none(fields: Sequence[str]) -> ValidationRule:
    """Schema rule: the named fields must be supplied together or not at all."""

    names = tuple(fields)

    def _rule(body: Any, _key: str | None, _context: Mapping[str, Any]) -> ValidationIssue | None:
        present = [name for name in names if name in body]
        if present and len(present) != len(names):
            missing = [name for name in names if name not in present]
            return ValidationIssue(
                field=None,
                message=(
                    f"{', '.join(names)} must be provided together; "
                    f"missing: {', '.join(missing)}"
                ),
                error_code=ErrorCode.MISSING_FIELD.value,
            )
        return None

    return _rule


def validate_request(
    body: Mapping[str, Any],
    property_rules: Mapping[str, ValidationRule],
    schema_rules: Sequence[ValidationRule] = (),
) -> list[ValidationIssue]:
    """Run every applicable rule and collect the failures."""

    issues: list[ValidationIssue] = []

    for key, rule in property_rules.items():
        if key not in body:
            continue
        issue = rule(body[key], key, body)
        if issue is not None:
            issues.append(issue)

    for rule in schema_rules:
        issue = rule(body, None, body)
        if issue is not None:
            issues.append(issue)

    return issues
