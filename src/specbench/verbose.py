"""Verbose logging configuration for debug output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "specbench",
) -> logging.Logger:
    """
    Configure and return a logger for debug output.

    Writes to debug_file when one is given. Optionally also writes to stderr
    if verbose=True. The console report itself never goes through logging.

    Args:
        debug_file: Path to debug log file, created if missing.
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance. Child loggers of the
            ``specbench`` package propagate into it.

    Returns:
        Configured logger instance.

    Raises:
        RuntimeError: if a logger with this name is already configured.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger name per run"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    # Create formatter with timestamp
    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Add stderr handler only if verbose mode enabled
    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def teardown_logger(logger: logging.Logger) -> None:
    """Close and detach every handler of ``logger``."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
