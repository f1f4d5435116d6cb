"""Import spec files by path so their ``@spec`` bodies register."""

from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

logger = logging.getLogger(__name__)

SPEC_FILE_PATTERNS = ("*_spec.py", "spec_*.py")


def collect_spec_files(paths: list[Path]) -> list[Path]:
    """Expand directories into their spec files, keeping the given order.

    Files named explicitly are taken as is. Directories are searched
    recursively for ``*_spec.py`` and ``spec_*.py``, sorted by path.

    Raises FileNotFoundError for paths that do not exist.
    """
    files: list[Path] = []
    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f"spec path not found: {path}")
        if path.is_dir():
            found = {f for pattern in SPEC_FILE_PATTERNS for f in path.rglob(pattern)}
            files.extend(sorted(found))
        else:
            files.append(path)

    seen: set[Path] = set()
    unique = []
    for f in files:
        resolved = f.resolve()
        if resolved not in seen:
            seen.add(resolved)
            unique.append(f)
    return unique


def load_spec_file(path: Path, index: int = 0) -> ModuleType:
    """Import one spec file under a private module name and return the module."""
    module_name = f"specbench_spec_{index}_{path.stem}"
    module_spec = importlib.util.spec_from_file_location(module_name, path)
    if module_spec is None or module_spec.loader is None:
        raise ImportError(f"cannot import spec file {path}")

    module = importlib.util.module_from_spec(module_spec)
    sys.modules[module_name] = module
    try:
        module_spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise
    logger.debug(f"Loaded spec file {path} as {module_name}")
    return module


def load_spec_files(paths: list[Path]) -> list[ModuleType]:
    return [load_spec_file(p, i) for i, p in enumerate(collect_spec_files(paths))]
