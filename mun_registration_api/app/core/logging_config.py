"""
Logging setup for the registration API.

``setup_logging`` installs one console handler (and an optional file
handler) on the root logger and routes uvicorn's loggers through it, so
server and application records share a format and destination.
"""

import logging
from pathlib import Path

from .config import Settings, settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_PREFIX = "mun_registration_api"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _installed_handlers(root: logging.Logger) -> list:
    return [h for h in root.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def setup_logging(config: Settings = settings) -> None:
    """Configure logging from ``config.log_level`` and ``config.log_file``.

    Calling it again (repeated ``create_app`` calls, tests) replaces the
    handlers installed earlier instead of stacking new ones.  Handlers
    added by other code, such as pytest's capture handler, are left alone.
    """
    root = logging.getLogger()
    for handler in _installed_handlers(root):
        root.removeHandler(handler)
        handler.close()

    level = getattr(logging, config.log_level.upper(), logging.INFO)
    root.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(f"{HANDLER_PREFIX}.console")
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(f"{HANDLER_PREFIX}.file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(level)
