"""Capture of the source location and text of an assertion call."""

from __future__ import annotations

import ast
import inspect
import linecache
from dataclasses import dataclass
from types import FrameType


@dataclass(frozen=True)
class CallSite:
    """Where an assertion was written and what it looked like.

    ``actual_text`` and ``expected_text`` are the literal argument
    expressions when the call fits on one parseable line, otherwise None.
    """

    filename: str
    lineno: int
    source: str | None = None
    actual_text: str | None = None
    expected_text: str | None = None


def _argument_texts(line: str, func_name: str) -> tuple[str | None, str | None]:
    try:
        tree = ast.parse(line)
    except SyntaxError:
        # e.g. "if not require_int(x, to_be(1)):" on its own line
        try:
            tree = ast.parse(line + "\n    pass")
        except SyntaxError:
            return None, None

    for node in ast.walk(tree):
        if not isinstance(node, ast.Call) or len(node.args) < 2:
            continue
        func = node.func
        name = func.id if isinstance(func, ast.Name) else getattr(func, "attr", None)
        if name == func_name:
            return (
                ast.get_source_segment(line, node.args[0]),
                ast.get_source_segment(line, node.args[1]),
            )
    return None, None


def capture(func_name: str, frame: FrameType | None = None, depth: int = 2) -> CallSite:
    """Describe the caller ``depth`` frames above this function.

    With the default depth this is the code that called the public
    ``expect_*``/``require_*`` function which in turn called ``capture``.
    """
    if frame is None:
        frame = inspect.currentframe()
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
    if frame is None:
        return CallSite(filename="<unknown>", lineno=0)

    filename = frame.f_code.co_filename
    lineno = frame.f_lineno
    line = linecache.getline(filename, lineno).strip() or None
    actual_text = expected_text = None
    if line:
        actual_text, expected_text = _argument_texts(line, func_name)
    return CallSite(
        filename=filename,
        lineno=lineno,
        source=line,
        actual_text=actual_text,
        expected_text=expected_text,
    )
