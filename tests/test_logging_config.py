"""Tests for the logging setup shared by the app and uvicorn."""

import logging

import pytest

from mun_registration_api.app.core.config import Settings
from mun_registration_api.app.core.logging_config import HANDLER_PREFIX, LOG_FORMAT, setup_logging


def _own_handlers():
    return [h for h in logging.getLogger().handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for handler in _own_handlers():
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


def test_repeated_setup_replaces_handlers(restore_logging, tmp_path):
    log_file = tmp_path / "api.log"
    setup_logging(Settings(log_level="debug", log_file=str(log_file)))
    setup_logging(Settings(log_level="warning", log_file=str(log_file)))

    names = sorted(h.get_name() for h in _own_handlers())
    assert names == [f"{HANDLER_PREFIX}.console", f"{HANDLER_PREFIX}.file"]
    assert logging.getLogger().level == logging.WARNING
    assert all(h.formatter._fmt == LOG_FORMAT for h in _own_handlers())


def test_uvicorn_loggers_propagate_to_root(restore_logging):
    logging.getLogger("uvicorn.error").addHandler(logging.NullHandler())
    setup_logging(Settings(log_level="INFO", log_file=""))

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        assert uvicorn_logger.handlers == []
        assert uvicorn_logger.propagate is True
        assert uvicorn_logger.level == logging.INFO
    assert [h.get_name() for h in _own_handlers()] == [f"{HANDLER_PREFIX}.console"]


def test_file_handler_writes_records(restore_logging, tmp_path):
    log_file = tmp_path / "api.log"
    setup_logging(Settings(log_level="INFO", log_file=str(log_file)))
    logging.getLogger("mun_registration_api.test").info("registration desk open")
    for handler in _own_handlers():
        handler.flush()
    assert "[INFO] mun_registration_api.test: registration desk open" in log_file.read_text(encoding="utf-8")
