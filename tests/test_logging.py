"""Tests for logging utilities."""

import logging

import pytest
from rich.logging import RichHandler

from cngeno.utils.logging import PACKAGE_LOGGER, get_logger, log_call, setup_logging, timed


def test_setup_logging_configures_package_logger():
    package_logger = setup_logging(verbose=True)

    assert package_logger.name == PACKAGE_LOGGER
    assert package_logger.level == logging.DEBUG
    assert not package_logger.propagate
    assert any(isinstance(h, RichHandler) for h in package_logger.handlers)


def test_setup_logging_replaces_handlers(temp_dir):
    setup_logging()
    package_logger = setup_logging(log_file=str(temp_dir / "cngeno.log"))

    assert package_logger.level == logging.INFO
    assert len(package_logger.handlers) == 2
    assert sum(isinstance(h, logging.FileHandler) for h in package_logger.handlers) == 1


def test_log_file_receives_records(temp_dir):
    log_file = temp_dir / "cngeno.log"
    setup_logging(log_file=str(log_file))
    logging.getLogger("cngeno.pipeline").info("hello from the pipeline")

    for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
        handler.flush()
    assert "cngeno.pipeline - INFO - hello from the pipeline" in log_file.read_text()


def test_get_logger_namespaces():
    assert get_logger("cngeno.core").name == "cngeno.core"
    assert get_logger("cngeno").name == "cngeno"
    assert get_logger("scripts").name == "cngeno.scripts"


def test_timed_logs_start_and_end(caplog):
    log = logging.getLogger("cngeno.test")
    with caplog.at_level(logging.DEBUG, logger="cngeno.test"):
        with timed("work", log):
            pass

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Starting: work"
    assert messages[1].startswith("Completed: work")


def test_log_call_reraises(caplog):
    @log_call(logging.getLogger("cngeno.test"))
    def fail():
        raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG, logger="cngeno.test"):
        with pytest.raises(RuntimeError, match="boom"):
            fail()

    assert any(r.levelno == logging.ERROR and "boom" in r.getMessage() for r in caplog.records)
