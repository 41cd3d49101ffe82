"""Top-level pytest configuration for seer."""

import logging

import pytest

from seer.config import reset_settings
from seer.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def default_settings():
    """Give every test the built-in process-wide settings."""
    settings = reset_settings()
    yield settings
    reset_settings()


@pytest.fixture
def seer_logger():
    """Restore the seer logger after a test reconfigures it."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
