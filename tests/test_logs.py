"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from menudishes.logs import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_unknown_level_falls_back_to_info(tmp_path: Path) -> None:
    configure_logging(level="verbose", log_path=tmp_path / "debug.log")
    assert logging.getLogger().level == logging.INFO


def test_level_name_is_case_insensitive(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "debug.log"
    configure_logging(level="debug", log_path=log_path)

    logging.getLogger("menudishes.test").debug("hello")
    assert logging.getLogger().level == logging.DEBUG
    assert "hello" in log_path.read_text(encoding="utf-8")
