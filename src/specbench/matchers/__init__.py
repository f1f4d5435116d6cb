"""Matcher engine: pure per-kind comparisons behind a single dispatcher."""

from __future__ import annotations

from typing import Any

from specbench.matchers.base import (
    Expected,
    Intent,
    MatchResult,
    Predicates,
    ValueKind,
    not_to_be,
    not_to_be_like,
    to_be,
    to_be_like,
)
from specbench.matchers.numeric import (
    DOUBLE,
    EPSILON,
    INT,
    INTEGER_KINDS,
    LONG,
    LONGLONG,
    UINT,
    ULONG,
    ULONGLONG,
    coerce_double,
    coerce_integer,
    doubles_match,
    format_double,
    format_integer,
    integers_match,
)
from specbench.matchers.strings import STRING, coerce_string, format_string, strings_match

KINDS: dict[str, ValueKind] = {
    kind.name: kind for kind in (*INTEGER_KINDS, DOUBLE, STRING)
}


def coerce(kind: ValueKind, value: Any) -> Any:
    """Convert an operand to the Python representation of ``kind``."""
    if kind.is_integer:
        return coerce_integer(kind, value)
    if kind == DOUBLE:
        return coerce_double(value)
    if kind == STRING:
        return coerce_string(value)
    raise ValueError(f"Unknown value kind: '{kind.name}'")


def format_value(kind: ValueKind, value: Any) -> str:
    """Render an operand the way the kind's printf specifier would."""
    if kind.is_integer:
        return format_integer(value)
    if kind == DOUBLE:
        return format_double(value)
    if kind == STRING:
        return format_string(value)
    raise ValueError(f"Unknown value kind: '{kind.name}'")


def evaluate_match(
    kind: ValueKind,
    actual: Any,
    expected: Expected,
    *,
    epsilon: float = EPSILON,
) -> MatchResult:
    """Dispatch a comparison to the matcher for ``kind``.

    Both predicates are computed; the intent's direction picks which one
    must hold. ``not_to_*`` intents need the negative predicate, ``to_*``
    intents the positive one.

    Raises ValueError for unknown kinds and TypeError for operands the
    kind cannot represent.
    """
    if KINDS.get(kind.name) != kind:
        raise ValueError(f"Unknown value kind: '{kind.name}'")

    left = coerce(kind, actual)
    right = coerce(kind, expected.value)
    intent = expected.intent

    if kind.is_integer:
        predicates = integers_match(kind, left, right, intent)
    elif kind == DOUBLE:
        predicates = doubles_match(left, right, intent, epsilon=epsilon)
    else:
        predicates = strings_match(left, right, intent)

    passed = predicates.negative if intent.negated else predicates.positive
    return MatchResult(
        kind=kind, actual=left, expected=right, intent=intent, passed=passed
    )


__all__ = [
    "DOUBLE",
    "EPSILON",
    "Expected",
    "INT",
    "INTEGER_KINDS",
    "Intent",
    "KINDS",
    "LONG",
    "LONGLONG",
    "MatchResult",
    "Predicates",
    "STRING",
    "UINT",
    "ULONG",
    "ULONGLONG",
    "ValueKind",
    "coerce",
    "doubles_match",
    "evaluate_match",
    "format_value",
    "integers_match",
    "not_to_be",
    "not_to_be_like",
    "strings_match",
    "to_be",
    "to_be_like",
]
