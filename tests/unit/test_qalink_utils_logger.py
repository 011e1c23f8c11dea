"""Unit tests for qalink.utils logging helpers."""

import logging

import pytest

from qalink.utils import configure_logging, get_logger

pytestmark = pytest.mark.utils


def test_get_logger_namespaced():
    assert get_logger("link.extract_references").name == "qalink.link.extract_references"


def test_package_logger_has_null_handler():
    import qalink  # noqa: F401

    handlers = logging.getLogger("qalink").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_configure_logging_file(tmp_path, clean_logging):
    """Test that configure_logging writes qalink records to the given file."""
    log_file = tmp_path / "logs" / "qalink.log"
    configure_logging(log_file=log_file, level=logging.DEBUG)

    get_logger("test").info("hello from test")
    for handler in logging.getLogger("qalink").handlers:
        handler.flush()

    content = log_file.read_text()
    assert "qalink.test - INFO - hello from test" in content


def test_configure_logging_idempotent(tmp_path, clean_logging):
    configure_logging(log_file=tmp_path / "a.log")
    configure_logging(log_file=tmp_path / "b.log")

    non_null = [h for h in logging.getLogger("qalink").handlers if not isinstance(h, logging.NullHandler)]
    assert len(non_null) == 1
    assert not (tmp_path / "b.log").exists()


def test_configure_logging_stderr(clean_logging):
    configure_logging(level=logging.WARNING)
    logger = logging.getLogger("qalink")
    assert logger.level == logging.WARNING
    assert any(type(h) is logging.StreamHandler for h in logger.handlers)
