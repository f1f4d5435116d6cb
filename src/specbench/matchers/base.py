"""Base data structures for the matcher engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


class Intent(str, Enum):
    """Directional intent of an expectation, named after the wrapper that builds it."""

    TO_BE = "to_be"
    NOT_TO_BE = "not_to_be"
    TO_BE_LIKE = "to_be_like"
    NOT_TO_BE_LIKE = "not_to_be_like"

    @property
    def negated(self) -> bool:
        return self.value.startswith("not_to")

    @property
    def like(self) -> bool:
        return self.value.endswith("_like")


@dataclass(frozen=True)
class Expected:
    """An expected value tagged with the intent it is checked under."""

    value: Any
    intent: Intent

    def __str__(self) -> str:
        return f"{self.intent.value}({self.value!r})"


def to_be(value: Any) -> Expected:
    return Expected(value, Intent.TO_BE)


def not_to_be(value: Any) -> Expected:
    return Expected(value, Intent.NOT_TO_BE)


def to_be_like(value: Any) -> Expected:
    return Expected(value, Intent.TO_BE_LIKE)


def not_to_be_like(value: Any) -> Expected:
    return Expected(value, Intent.NOT_TO_BE_LIKE)


@dataclass(frozen=True)
class ValueKind:
    """A typed flavour of expectation.

    Attributes:
        name: Kind identifier used in the ``expect_<name>`` family.
        specifier: printf-style specifier shown for this kind (e.g. "%lu").
        bits: Width integer operands are wrapped to; None for non-integers.
        signed: Whether the integer kind is two's-complement signed.
    """

    name: str
    specifier: str
    bits: int | None = None
    signed: bool = True

    @property
    def is_integer(self) -> bool:
        return self.bits is not None


class Predicates(NamedTuple):
    """Independently computed positive and negative outcomes of one comparison."""

    positive: bool
    negative: bool


@dataclass
class MatchResult:
    """Result of matching one actual value against an Expected.

    Attributes:
        kind: Value kind the comparison ran under.
        actual: Actual operand after coercion to the kind.
        expected: Expected operand after coercion to the kind.
        intent: Directional intent that selected the predicate.
        passed: Whether the selected predicate held.
    """

    kind: ValueKind
    actual: Any
    expected: Any
    intent: Intent
    passed: bool
