"""Tests for logging setup."""
from __future__ import annotations
import logging

import pytest

from aocsolver.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("aocsolver")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_repeated_setup_does_not_duplicate_handlers(package_logger):
    setup_logging(logging.INFO)
    setup_logging(logging.WARNING)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.WARNING


def test_log_file_receives_records(package_logger, tmp_path):
    log_file = tmp_path / "aoc.log"
    setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger("aocsolver.cache").info("cached 2024-01")
    for handler in package_logger.handlers:
        handler.flush()

    contents = log_file.read_text(encoding="utf-8")
    assert "aocsolver.cache - INFO - cached 2024-01" in contents
