"""Tests for gasket_docs.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from gasket_docs.logging import configure_logging, get_logger


def test_get_logger_uses_package_hierarchy() -> None:
    assert get_logger().name == "gasket_docs"
    assert get_logger("index").name == "gasket_docs.index"


def test_configure_logging_does_not_stack_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "docs.log"
    configure_logging(verbose=True)
    logger = configure_logging(verbose=True, log_file=log_file)
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        get_logger("index").debug("hello from the index writer")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the index writer" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
