import io
import logging

import pytest

from hoverpie.core.logging_setup import setup_logging

@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)

def test_debug_logging(restore_root_logger):
    stream = io.StringIO()
    setup_logging(debug=True, stream=stream)

    logging.getLogger("hoverpie.test").debug("hello")

    assert restore_root_logger.level == logging.DEBUG
    assert "[DEBUG]" in stream.getvalue()
    assert "hello" in stream.getvalue()
    assert logging.getLogger("matplotlib").level == logging.WARNING

def test_default_level_is_warning(restore_root_logger):
    stream = io.StringIO()
    setup_logging(stream=stream)

    logging.getLogger("hoverpie.test").info("quiet")

    assert restore_root_logger.level == logging.WARNING
    assert stream.getvalue() == ""
