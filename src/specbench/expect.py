"""Typed expectation and requirement families.

``expect_<kind>(actual, expected)`` records an assertion and carries on.
``require_<kind>(actual, expected)`` records the same assertion, but when it
is not satisfied the rest of the enclosing ``it`` body is skipped; outer
describe blocks and the spec keep running.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from specbench import source
from specbench.context import get_context
from specbench.errors import RequirementAborted
from specbench.matchers import (
    DOUBLE,
    INT,
    LONG,
    LONGLONG,
    STRING,
    UINT,
    ULONG,
    ULONGLONG,
    Expected,
    ValueKind,
)
from specbench.recorder import record

logger = logging.getLogger(__name__)

Assertion = Callable[[Any, Expected], bool]


def _expectation(kind: ValueKind) -> Assertion:
    name = f"expect_{kind.name}"

    def expect(actual: Any, expected: Expected) -> bool:
        return record(kind, actual, expected, source.capture(name))

    expect.__name__ = expect.__qualname__ = name
    expect.__doc__ = f"Record a {kind.name} expectation; returns whether it held."
    return expect


def _requirement(kind: ValueKind) -> Assertion:
    name = f"require_{kind.name}"

    def require(actual: Any, expected: Expected) -> bool:
        if record(kind, actual, expected, source.capture(name)):
            return True
        label = get_context().require_it(name).label
        logger.debug(f"Requirement failed, aborting rest of '{label}'")
        raise RequirementAborted(label)

    require.__name__ = require.__qualname__ = name
    require.__doc__ = (
        f"Record a {kind.name} expectation; abort the enclosing it body if it fails."
    )
    return require


expect_int = _expectation(INT)
expect_uint = _expectation(UINT)
expect_long = _expectation(LONG)
expect_ulong = _expectation(ULONG)
expect_longlong = _expectation(LONGLONG)
expect_ulonglong = _expectation(ULONGLONG)
expect_double = _expectation(DOUBLE)
expect_string = _expectation(STRING)

require_int = _requirement(INT)
require_uint = _requirement(UINT)
require_long = _requirement(LONG)
require_ulong = _requirement(ULONG)
require_longlong = _requirement(LONGLONG)
require_ulonglong = _requirement(ULONGLONG)
require_double = _requirement(DOUBLE)
require_string = _requirement(STRING)
