"""
Shared pytest fixtures for the coinunits test suite.
"""

import logging

import pytest

from coinunits_core.denomination import Denomination


@pytest.fixture(params=list(Denomination), ids=lambda d: d.suffix())
def denomination(request):
    """Every denomination in turn."""
    return request.param


@pytest.fixture
def coinunits_logger():
    """The package logger, with handlers and level restored afterwards."""
    log = logging.getLogger("coinunits")
    saved_handlers = list(log.handlers)
    saved_level = log.level
    yield log
    for handler in log.handlers:
        if handler not in saved_handlers:
            handler.close()
    log.handlers[:] = saved_handlers
    log.setLevel(saved_level)
