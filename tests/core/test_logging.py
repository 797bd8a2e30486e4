"""Tests for daybook.core.utils.logging."""

import os

import pytest
from loguru import logger

from daybook.core.exceptions import ConfigurationError
from daybook.core.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_logger():
    yield
    logger.remove()


def test_file_sink_receives_messages(tmp_dir):
    log_path = os.path.join(tmp_dir, "daybook.log")
    setup_logging(level="info", log_file=log_path)
    logger.info("entry added")
    logger.debug("too quiet to appear")
    logger.complete()

    with open(log_path) as f:
        content = f.read()
    assert "entry added" in content
    assert "too quiet" not in content


def test_unknown_level_raises():
    with pytest.raises(ConfigurationError, match="Unknown log level"):
        setup_logging(level="chatty")
