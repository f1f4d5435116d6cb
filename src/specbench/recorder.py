"""Expectation recorder: evaluates one assertion and updates the innermost it tally."""

from __future__ import annotations

import logging
from typing import Any

from specbench.context import get_context
from specbench.errors import SpecUsageError
from specbench.matchers import Expected, ValueKind, evaluate_match
from specbench.source import CallSite

logger = logging.getLogger(__name__)


def record(kind: ValueKind, actual: Any, expected: Expected, site: CallSite) -> bool:
    """Evaluate one expectation and count it against the innermost it block.

    The block's ``seen`` counter always goes up; ``passed`` only when the
    intent's predicate holds. A failure writes a diagnostic to the reporter.
    Outer blocks are never touched here, they receive the tally on fold.

    Returns whether the expectation was satisfied.
    """
    if not isinstance(expected, Expected):
        raise SpecUsageError(
            f"expected value must be wrapped in to_be/not_to_be/to_be_like/not_to_be_like, "
            f"got {expected!r}"
        )

    ctx = get_context()
    block = ctx.require_it(f"expect_{kind.name}")

    # Operands the kind cannot hold raise here, before counting; the it
    # block then records the error as a single failed assertion.
    result = evaluate_match(kind, actual, expected, epsilon=ctx.config.epsilon)
    block.tally.seen += 1
    if result.passed:
        block.tally.passed += 1
        return True

    logger.debug(
        f"Expectation failed in '{block.label}' at {site.filename}:{site.lineno}: "
        f"{result.actual!r} {result.intent.value} {result.expected!r}"
        + (f" ({site.source})" if site.source else "")
    )
    ctx.reporter.assertion_failure(site, result)
    return False
