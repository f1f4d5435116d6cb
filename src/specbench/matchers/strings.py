"""String matchers with null-aware semantics."""

from __future__ import annotations

from specbench.matchers.base import Intent, Predicates, ValueKind

STRING = ValueKind("string", "%s")

# What printf shows for a NULL char* on glibc.
NULL_TEXT = "(null)"


def coerce_string(value) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"expected str or None, got {type(value).__name__}")


def strings_match(actual: str | None, expected: str | None, intent: Intent) -> Predicates:
    """Compare two nullable strings.

    When either side is None only identity of the null state counts:
    two Nones are equal, None and any string are not. Otherwise to_be and
    not_to_be compare exactly and the *_like intents ignore case.
    """
    if actual is None or expected is None:
        return Predicates(
            positive=actual is None and expected is None,
            negative=not (actual is None and expected is None),
        )
    if intent.like:
        folded = actual.casefold() == expected.casefold()
        return Predicates(positive=folded, negative=not folded)
    return Predicates(positive=actual == expected, negative=actual != expected)


def format_string(value: str | None) -> str:
    return NULL_TEXT if value is None else value
