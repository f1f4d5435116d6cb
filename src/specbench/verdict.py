"""Process-wide aggregate pass/fail state."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Verdict(str, Enum):
    UNSET = "unset"
    SUCCESS = "success"
    FAILURE = "failure"


class SuiteVerdict:
    """Sticky-failure verdict shared by every spec in the process.

    Starts UNSET. Each spec calls ``begin_spec`` on entry, which moves the
    verdict to SUCCESS unless a failure is already recorded, and
    ``finish_spec`` on exit, which flips a SUCCESS verdict to FAILURE when
    the spec saw more assertions than passed. Nothing moves a FAILURE back.
    """

    def __init__(self) -> None:
        self._state = Verdict.UNSET

    @property
    def state(self) -> Verdict:
        return self._state

    def begin_spec(self, name: str) -> None:
        if self._state is not Verdict.FAILURE:
            if self._state is Verdict.UNSET:
                logger.debug(f"Suite verdict initialized to success by spec '{name}'")
            self._state = Verdict.SUCCESS

    def finish_spec(self, name: str, seen: int, passed: int) -> None:
        if self._state is Verdict.SUCCESS and seen > passed:
            logger.debug(
                f"Suite verdict flipped to failure by spec '{name}' ({passed}/{seen} passed)"
            )
            self._state = Verdict.FAILURE

    def exit_code(self) -> int:
        """0 for success or when no spec ran, 1 once any spec failed."""
        return 1 if self._state is Verdict.FAILURE else 0

    def __repr__(self) -> str:
        return f"SuiteVerdict({self._state.value})"
