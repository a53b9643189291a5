"""
Shared pytest fixtures.
"""

import logging

import pytest

import pacaudit.logging_config as logging_config


@pytest.fixture(autouse=True)
def reset_pacaudit_logger():
    """Restore the pacaudit logger so caplog sees records in every test."""
    yield
    logger = logging.getLogger(logging_config.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
