"""Unit tests for configure_logging."""
import logging

import pytest

from text_extractor.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger("text_extractor")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_sets_level_case_insensitively():
    configure_logging("debug")
    assert logging.getLogger("text_extractor").level == logging.DEBUG


def test_adds_a_single_handler_when_called_twice():
    configure_logging("INFO")
    configure_logging("WARNING")
    logger = logging.getLogger("text_extractor")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_child_loggers_inherit_level():
    configure_logging("ERROR")
    assert logging.getLogger("text_extractor.extraction").getEffectiveLevel() == logging.ERROR
