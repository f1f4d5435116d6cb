"""describe / it blocks and their before/after hooks."""

from __future__ import annotations

import logging
from typing import Callable

from specbench.context import (
    DescribeScope,
    Hook,
    ItBlock,
    SpecRun,
    SuiteContext,
    get_context,
    noop_hook,
)
from specbench.errors import RequirementAborted, SpecUsageError

logger = logging.getLogger(__name__)

Body = Callable[[], None]


def _record_error(ctx: SuiteContext, block: ItBlock, where: str, exc: Exception) -> None:
    """Count an unexpected exception as one failed assertion of ``block``."""
    block.tally.seen += 1
    logger.debug(f"Unexpected error in {where} of '{block.label}'", exc_info=True)
    ctx.reporter.unexpected_error(f"{where} {block.label}", exc)


def _run_hook(ctx: SuiteContext, block: ItBlock, hook: Hook, where: str) -> bool:
    try:
        hook(block.label)
    except SpecUsageError:
        raise
    except Exception as exc:
        _record_error(ctx, block, where, exc)
        return False
    return True


def _run_body(ctx: SuiteContext, spec_run: SpecRun, block: ItBlock, body: Body) -> None:
    spec_run.current_it = block
    try:
        body()
    except RequirementAborted:
        pass
    except SpecUsageError:
        raise
    except Exception as exc:
        _record_error(ctx, block, "body", exc)
    finally:
        spec_run.current_it = None


def describe(label: str, body: Body | None = None):
    """Group ``it`` blocks under ``label`` and run ``body`` right away.

    Hooks registered inside ``body`` belong to this scope only: they apply to
    the ``it`` blocks declared after them here, never to parent, sibling or
    nested describe scopes.

    Called without ``body`` it returns a decorator that runs the decorated
    function as the body.
    """
    if body is None:

        def decorator(fn: Body) -> Body:
            describe(label, fn)
            return fn

        return decorator

    ctx = get_context()
    spec_run = ctx.require_spec("describe")
    if spec_run.current_it is not None:
        raise SpecUsageError("describe cannot be nested inside an it block")

    spec_run.scopes.append(DescribeScope(label))
    try:
        body()
    finally:
        spec_run.scopes.pop()


def before_each(hook: Hook) -> Hook:
    """Replace the current scope's before-hook. Usable as a decorator."""
    get_context().require_scope("before_each").before_each = hook
    return hook


def after_each(hook: Hook) -> Hook:
    """Replace the current scope's after-hook. Usable as a decorator."""
    get_context().require_scope("after_each").after_each = hook
    return hook


def it(label: str, body: Body | None = None):
    """Run one test case.

    The sequence is fixed: before-hook, body, after-hook, verdict line, fold
    into the spec tally. A failed ``require_*`` ends the body early but the
    steps after it still run. An unexpected exception from the body or a
    hook counts as one failed assertion.
    """
    if body is None:

        def decorator(fn: Body) -> Body:
            it(label, fn)
            return fn

        return decorator

    ctx = get_context()
    spec_run = ctx.require_spec("it")
    if spec_run.current_it is not None:
        raise SpecUsageError("it blocks cannot be nested")

    if spec_run.scopes:
        scope = spec_run.scopes[-1]
        context_label = scope.label
        before, after = scope.before_each, scope.after_each
    else:
        context_label = spec_run.name
        before, after = noop_hook, noop_hook

    block = ItBlock(label)
    if _run_hook(ctx, block, before, "before_each"):
        _run_body(ctx, spec_run, block, body)
    _run_hook(ctx, block, after, "after_each")

    ctx.reporter.it_result(context_label, label, block.tally.all_passed)
    spec_run.tally.fold(block.tally)
    logger.debug(
        f"it '{context_label} {label}': {block.tally.passed}/{block.tally.seen} passed"
    )
