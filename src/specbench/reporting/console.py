from __future__ import annotations

import os
import sys
from typing import TextIO

from specbench.matchers import MatchResult, format_value
from specbench.source import CallSite


def _display_path(filename: str) -> str:
    """Show files under the working directory relative to it."""
    try:
        rel = os.path.relpath(filename)
    except ValueError:
        return filename
    return filename if rel.startswith("..") else rel


class ConsoleReporter:
    """Line-oriented report writer.

    Produces, per spec::

        Begin spec <name>
            ✓ <describe> <it>
            𝙓 <describe> <it>
            * [file.py, L12]
            |    expect_int(x, to_be(9))
            |    expected x to_be(9) -> 9
            |         got x is(1)
        Done spec: P of N tests passed
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        pass_glyph: str = "✓",
        fail_glyph: str = "𝙓",
    ):
        self._stream = stream
        self.pass_glyph = pass_glyph
        self.fail_glyph = fail_glyph

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys and typer's CliRunner see output.
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str = "") -> None:
        print(line, file=self.stream)

    def spec_begin(self, name: str) -> None:
        self._write(f"Begin spec <{name}>")

    def spec_done(self, passed: int, total: int) -> None:
        self._write(f"Done spec: {passed} of {total} tests passed")
        self._write()

    def it_result(self, context: str, label: str, passed: bool) -> None:
        glyph = self.pass_glyph if passed else self.fail_glyph
        self._write(f"\t{glyph} {context} {label}")

    def assertion_failure(self, site: CallSite, result: MatchResult) -> None:
        """Write the diagnostic block for an unsatisfied expectation.

        A violated not_to_* intent has nothing useful to show beyond the
        expression itself, so only the to_* shape prints both values.
        """
        actual_text = site.actual_text or repr(result.actual)
        intent_text = site.expected_text or f"{result.intent.value}({result.expected!r})"

        self._write(f"\t* [{_display_path(site.filename)}, L{site.lineno}]")
        if result.intent.negated:
            self._write(f"\t|\texpected {actual_text} {intent_text}")
        else:
            expected = format_value(result.kind, result.expected)
            actual = format_value(result.kind, result.actual)
            self._write(f"\t|\texpected {actual_text} {intent_text} -> {expected}")
            self._write(f"\t|\t     got {actual_text} is({actual})")

    def unexpected_error(self, where: str, exc: BaseException) -> None:
        self._write(f"\t* [{where}] raised {type(exc).__name__}: {exc}")
