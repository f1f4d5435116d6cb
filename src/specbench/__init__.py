"""Embeddable describe/it spec engine with typed expectations.

Declare specs with ``@spec``, group cases with ``describe`` and ``it``, and
check values with the ``expect_<kind>`` / ``require_<kind>`` families::

    from specbench import describe, expect_int, it, spec, suite_main, to_be

    @spec("Arithmetic")
    def arithmetic():
        def cases():
            it("adds", lambda: expect_int(1 + 1, to_be(2)))
        describe("addition", cases)

    if __name__ == "__main__":
        suite_main()
"""

from specbench.blocks import after_each, before_each, describe, it
from specbench.config import RunConfig, load_config
from specbench.context import configure, get_context, reset_context
from specbench.errors import RequirementAborted, SpecbenchError, SpecUsageError
from specbench.expect import (
    expect_double,
    expect_int,
    expect_long,
    expect_longlong,
    expect_string,
    expect_uint,
    expect_ulong,
    expect_ulonglong,
    require_double,
    require_int,
    require_long,
    require_longlong,
    require_string,
    require_uint,
    require_ulong,
    require_ulonglong,
)
from specbench.matchers import EPSILON, not_to_be, not_to_be_like, to_be, to_be_like
from specbench.registry import reset_registry, run_spec, run_suite, spec, suite_main
from specbench.verdict import SuiteVerdict, Verdict

__all__ = [
    "EPSILON",
    "RequirementAborted",
    "RunConfig",
    "SpecUsageError",
    "SpecbenchError",
    "SuiteVerdict",
    "Verdict",
    "after_each",
    "before_each",
    "configure",
    "describe",
    "expect_double",
    "expect_int",
    "expect_long",
    "expect_longlong",
    "expect_string",
    "expect_uint",
    "expect_ulong",
    "expect_ulonglong",
    "get_context",
    "it",
    "load_config",
    "not_to_be",
    "not_to_be_like",
    "require_double",
    "require_int",
    "require_long",
    "require_longlong",
    "require_string",
    "require_uint",
    "require_ulong",
    "require_ulonglong",
    "reset_context",
    "reset_registry",
    "run_spec",
    "run_suite",
    "spec",
    "suite_main",
    "to_be",
    "to_be_like",
]
