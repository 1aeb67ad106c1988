"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers added by setup_logging so captured streams aren't reused."""
    yield
    logger = logging.getLogger('leaguetable')
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
