"""Pytest configuration and fixtures."""

import logging

import pytest

from specbench.context import reset_context
from specbench.registry import get_registry, reset_registry, run_spec


@pytest.fixture(autouse=True)
def fresh_suite():
    """Give every test an empty spec registry and a fresh suite context."""
    reset_registry()
    reset_context()
    yield
    reset_registry()
    reset_context()


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from specbench loggers so setup_logger can run again."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("specbench")
    ]
    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def run_body():
    """Register ``body`` as a spec named ``name``, run it, return its tally."""

    def _run(body, name="Inline"):
        descriptor = get_registry().register(name, body)
        return run_spec(descriptor)

    return _run
