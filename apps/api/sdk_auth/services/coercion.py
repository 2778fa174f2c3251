"""Normalise numeric fields that clients send as strings."""
from __future__ import annotations

import re
from typing import Any, Mapping

NUMERIC_FIELDS: tuple[str, ...] = ("role", "expirationSeconds")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(text: str) -> float | int:
    """Lenient base-10 parse: read leading digits, NaN when there are none.

    Digit runs too long to convert saturate to +/-inf so range rules still apply.
    """

    match = _LEADING_INT.match(text)
    if match is None:
        return float("nan")
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        return float("-inf") if digits.startswith("-") else float("inf")


def coerce_request_body(body: Mapping[str, Any], fields: tuple[str, ...] = NUMERIC_FIELDS) -> dict[str, Any]:
    """Return a copy of ``body`` with string-encoded numeric fields parsed."""

    coerced = dict(body)
    for name in fields:
        value = coerced.get(name)
        if isinstance(value, str):
            coerced[name] = parse_int(value)
    return coerced
