"""Spec registration and the suite entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, NoReturn

from specbench.context import SpecRun, Tally, get_context
from specbench.errors import SpecUsageError

logger = logging.getLogger(__name__)

SpecBody = Callable[[], None]


@dataclass
class SpecDescriptor:
    """A registered spec.

    Attributes:
        name: Name shown in the ``Begin spec`` header; unique per process.
        body: Callable holding the spec's describe/it declarations.
        module: Module the body was defined in, for diagnostics.
        has_run: Set once the spec has executed; specs never run twice.
    """

    name: str
    body: SpecBody
    module: str | None = None
    has_run: bool = False


class SpecRegistry:
    """Ordered collection of specs. Registration order is execution order."""

    def __init__(self) -> None:
        self._specs: dict[str, SpecDescriptor] = {}

    def register(self, name: str, body: SpecBody) -> SpecDescriptor:
        if name in self._specs:
            raise SpecUsageError(f"Spec '{name}' is already registered")
        descriptor = SpecDescriptor(
            name=name, body=body, module=getattr(body, "__module__", None)
        )
        self._specs[name] = descriptor
        logger.debug(f"Registered spec '{name}' from {descriptor.module}")
        return descriptor

    def pending(self) -> list[SpecDescriptor]:
        return [d for d in self._specs.values() if not d.has_run]

    def __iter__(self):
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs


_registry = SpecRegistry()


def get_registry() -> SpecRegistry:
    return _registry


def reset_registry() -> SpecRegistry:
    global _registry
    _registry = SpecRegistry()
    return _registry


def spec(name: str | SpecBody | None = None):
    """Register a spec body for the next ``run_suite`` call.

    Usable bare (``@spec``, named after the function) or with an explicit
    name (``@spec("Name")``). The function is returned unchanged.
    """
    if callable(name):
        get_registry().register(name.__name__, name)
        return name

    def decorator(fn: SpecBody) -> SpecBody:
        get_registry().register(name or fn.__name__, fn)
        return fn

    return decorator


def run_spec(descriptor: SpecDescriptor) -> Tally:
    """Execute one spec and fold its outcome into the suite verdict."""
    ctx = get_context()
    if ctx.current_spec is not None:
        raise SpecUsageError(
            f"Spec '{descriptor.name}' cannot run inside spec '{ctx.current_spec.name}'"
        )

    descriptor.has_run = True
    ctx.verdict.begin_spec(descriptor.name)
    spec_run = SpecRun(descriptor.name)
    ctx.current_spec = spec_run
    ctx.reporter.spec_begin(descriptor.name)
    logger.debug(f"Begin spec '{descriptor.name}'")

    try:
        descriptor.body()
    except SpecUsageError:
        raise
    except Exception as exc:
        # Escaped every it block: charge it to the spec as one failed test.
        spec_run.tally.seen += 1
        logger.debug(f"Unexpected error in spec '{descriptor.name}'", exc_info=True)
        ctx.reporter.unexpected_error(descriptor.name, exc)
    finally:
        ctx.current_spec = None

    tally = spec_run.tally
    ctx.reporter.spec_done(tally.passed, tally.seen)
    ctx.verdict.finish_spec(descriptor.name, tally.seen, tally.passed)
    logger.debug(f"Done spec '{descriptor.name}': {tally.passed}/{tally.seen} passed")
    return tally


def run_suite() -> int:
    """Run every registered spec that has not run yet, in registration order.

    Returns the process exit status derived from the suite verdict.
    """
    ctx = get_context()
    for descriptor in get_registry().pending():
        run_spec(descriptor)
    code = ctx.verdict.exit_code()
    logger.debug(f"Suite finished with verdict {ctx.verdict.state.value}")
    return code


def suite_main() -> NoReturn:
    """Run the suite and exit the process with its verdict."""
    sys.exit(run_suite())
