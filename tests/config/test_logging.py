from __future__ import annotations

import logging

from malojapy.config import configure_logging


def test_configure_logging_force_resets_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        configure_logging(level=logging.DEBUG, force=True)

        assert root.level == logging.DEBUG
        assert root.handlers
    finally:
        for handler in root.handlers:
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)


def test_configure_logging_quiets_transport_loggers_unless_debug() -> None:
    root = logging.getLogger()
    previous_handlers = list(root.handlers)
    previous_level = root.level
    httpx_logger = logging.getLogger("httpx")
    previous_httpx_level = httpx_logger.level
    try:
        configure_logging(level=logging.INFO, force=True)
        assert httpx_logger.level == logging.WARNING

        configure_logging(level=logging.DEBUG, force=True)
        assert httpx_logger.level == logging.DEBUG
    finally:
        for handler in root.handlers:
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
        httpx_logger.setLevel(previous_httpx_level)
        logging.getLogger("httpcore").setLevel(logging.NOTSET)
