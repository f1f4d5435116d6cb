"""Process-wide run state: verdict, active spec, describe scopes, it tally."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TextIO

from specbench.config import RunConfig
from specbench.errors import SpecUsageError
from specbench.reporting import ConsoleReporter
from specbench.verdict import SuiteVerdict

Hook = Callable[[str], None]


def noop_hook(label: str) -> None:
    pass


@dataclass
class Tally:
    """Assertions seen and passed."""

    seen: int = 0
    passed: int = 0

    @property
    def all_passed(self) -> bool:
        return self.seen == self.passed

    def fold(self, other: Tally) -> None:
        self.seen += other.seen
        self.passed += other.passed


@dataclass
class DescribeScope:
    label: str
    before_each: Hook = noop_hook
    after_each: Hook = noop_hook


@dataclass
class ItBlock:
    label: str
    tally: Tally = field(default_factory=Tally)


@dataclass
class SpecRun:
    """A spec in progress. Owns the spec-wide tally and its describe stack."""

    name: str
    tally: Tally = field(default_factory=Tally)
    scopes: list[DescribeScope] = field(default_factory=list)
    current_it: ItBlock | None = None


class SuiteContext:
    """Everything the declarative API mutates while specs run.

    Execution is strictly sequential, so a single instance is shared
    without locking.
    """

    def __init__(self, config: RunConfig | None = None, stream: TextIO | None = None):
        self.config = config or RunConfig()
        self.reporter = ConsoleReporter(
            stream,
            pass_glyph=self.config.pass_glyph,
            fail_glyph=self.config.fail_glyph,
        )
        self.verdict = SuiteVerdict()
        self.current_spec: SpecRun | None = None

    def require_spec(self, what: str) -> SpecRun:
        if self.current_spec is None:
            raise SpecUsageError(f"{what} must be called while a spec is running")
        return self.current_spec

    def require_scope(self, what: str) -> DescribeScope:
        spec_run = self.require_spec(what)
        if not spec_run.scopes:
            raise SpecUsageError(f"{what} must be called inside a describe block")
        return spec_run.scopes[-1]

    def require_it(self, what: str) -> ItBlock:
        spec_run = self.require_spec(what)
        if spec_run.current_it is None:
            raise SpecUsageError(f"{what} must be called inside an it block")
        return spec_run.current_it


_context = SuiteContext()


def get_context() -> SuiteContext:
    return _context


def reset_context(config: RunConfig | None = None, stream: TextIO | None = None) -> SuiteContext:
    """Replace the process context with a fresh one and return it."""
    global _context
    _context = SuiteContext(config=config, stream=stream)
    return _context


def configure(config: RunConfig) -> SuiteContext:
    """Apply ``config`` to the current context, keeping its verdict."""
    ctx = get_context()
    ctx.config = config
    ctx.reporter.pass_glyph = config.pass_glyph
    ctx.reporter.fail_glyph = config.fail_glyph
    return ctx
