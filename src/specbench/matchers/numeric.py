"""Integer and floating point matchers."""

from __future__ import annotations

import operator

from specbench.matchers.base import Intent, Predicates, ValueKind

# Tolerance used by to_be_like / not_to_be_like on doubles.
EPSILON = 1e-9

INT = ValueKind("int", "%d", bits=32, signed=True)
UINT = ValueKind("uint", "%u", bits=32, signed=False)
LONG = ValueKind("long", "%ld", bits=64, signed=True)
ULONG = ValueKind("ulong", "%lu", bits=64, signed=False)
LONGLONG = ValueKind("longlong", "%lld", bits=64, signed=True)
ULONGLONG = ValueKind("ulonglong", "%llu", bits=64, signed=False)
DOUBLE = ValueKind("double", "%lf")

INTEGER_KINDS = (INT, UINT, LONG, ULONG, LONGLONG, ULONGLONG)


def coerce_integer(kind: ValueKind, value) -> int:
    """Wrap ``value`` to the width of ``kind`` the way a C cast would.

    Raises TypeError for operands that are not integers (floats included).
    """
    number = operator.index(value)
    mask = (1 << kind.bits) - 1
    number &= mask
    if kind.signed and number >> (kind.bits - 1):
        number -= 1 << kind.bits
    return number


def coerce_double(value) -> float:
    if isinstance(value, (str, bytes)) or value is None:
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def integers_match(kind: ValueKind, actual: int, expected: int, intent: Intent) -> Predicates:
    """Exact comparison. Likeness on integers is the same as equality."""
    return Predicates(positive=actual == expected, negative=actual != expected)


def doubles_match(
    actual: float, expected: float, intent: Intent, epsilon: float = EPSILON
) -> Predicates:
    """Exact comparison for to_be/not_to_be, epsilon window for the *_like intents.

    A difference of exactly ``epsilon`` counts as alike.
    """
    if intent.like:
        delta = abs(actual - expected)
        return Predicates(positive=delta <= epsilon, negative=delta > epsilon)
    return Predicates(positive=actual == expected, negative=actual != expected)


def format_integer(value: int) -> str:
    return str(value)


def format_double(value: float) -> str:
    return f"{value:f}"
