"""Tests for the composable request validator."""
from __future__ import annotations

import pytest

from sdk_auth.services.validation import (
    ErrorCode,
    in_number_array,
    is_between,
    is_required_all_or_none,
    validate_request,
)

PROPERTY_RULES = {
    "role": in_number_array([0, 1]),
    "expirationSeconds": is_between(1800, 172800),
}
SCHEMA_RULES = [is_required_all_or_none(["meetingNumber", "role"])]


def test_in_number_array_accepts_member() -> None:
    assert in_number_array([0, 1])(0, "role", {"role": 0}) is None


def test_in_number_array_rejects_non_member() -> None:
    issue = in_number_array([0, 1])(2, "role", {"role": 2})

    assert issue is not None
    assert issue.field == "role"
    assert issue.error_code == ErrorCode.OUT_OF_BOUNDS.value


@pytest.mark.parametrize("value", ["x", float("nan"), None, True, [0]])
def test_in_number_array_rejects_non_numbers(value) -> None:
    issue = in_number_array([0, 1])(value, "role", {"role": value})

    assert issue is not None
    assert issue.error_code == ErrorCode.TYPE_ERROR.value


@pytest.mark.parametrize("value", [1800, 172800, 3600, 1800.0])
def test_is_between_inclusive_bounds(value) -> None:
    assert is_between(1800, 172800)(value, "expirationSeconds", {}) is None


@pytest.mark.parametrize("value", [1799, 172801])
def test_is_between_rejects_outside_range(value) -> None:
    issue = is_between(1800, 172800)(value, "expirationSeconds", {})

    assert issue is not None
    assert issue.error_code == ErrorCode.OUT_OF_BOUNDS.value


def test_is_between_rejects_strings() -> None:
    issue = is_between(1800, 172800)("3600", "expirationSeconds", {})

    assert issue is not None
    assert issue.error_code == ErrorCode.TYPE_ERROR.value


@pytest.mark.parametrize(
    ("body", "fails"),
    [
        ({"meetingNumber": 1, "role": 0}, False),
        ({}, False),
        ({"meetingNumber": 1}, True),
        ({"role": 0}, True),
    ],
)
def test_is_required_all_or_none(body, fails) -> None:
    issue = is_required_all_or_none(["meetingNumber", "role"])(body, None, body)

    if fails:
        assert issue is not None
        assert issue.field is None
        assert issue.error_code == ErrorCode.MISSING_FIELD.value
    else:
        assert issue is None


def test_validate_request_is_silent_for_valid_and_absent_fields() -> None:
    assert validate_request({"meetingNumber": 123, "role": 1}, PROPERTY_RULES, SCHEMA_RULES) == []
    assert validate_request({}, PROPERTY_RULES, SCHEMA_RULES) == []


def test_validate_request_collects_every_failure() -> None:
    body = {"role": 7, "expirationSeconds": 10}

    issues = validate_request(body, PROPERTY_RULES, SCHEMA_RULES)

    assert [(issue.field, issue.error_code) for issue in issues] == [
        ("role", "OUT_OF_BOUNDS"),
        ("expirationSeconds", "OUT_OF_BOUNDS"),
        (None, "MISSING_FIELD"),
    ]


def test_validate_request_treats_null_as_present() -> None:
    issues = validate_request({"meetingNumber": 1, "role": None}, PROPERTY_RULES, SCHEMA_RULES)

    assert len(issues) == 1
    assert issues[0].field == "role"
    assert issues[0].error_code == "TYPE_ERROR"


def test_schema_rules_run_in_order() -> None:
    calls: list[str] = []

    def first(body, key, context):
        calls.append("first")
        return None

    def second(body, key, context):
        calls.append("second")
        assert key is None
        assert body is context
        return None

    validate_request({}, {}, [first, second])

    assert calls == ["first", "second"]


def test_issue_as_dict_shape() -> None:
    issue = in_number_array([0, 1])(5, "role", {})

    assert issue is not None
    assert set(issue.as_dict()) == {"field", "message", "error_code"}
