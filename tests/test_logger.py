"""Tests for the logging setup helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from utils.logger import HANDLER_NAME, configure_logging, get_logger


def _subtrack_handlers() -> list[logging.Handler]:
    return [handler for handler in logging.getLogger().handlers if handler.get_name() == HANDLER_NAME]


def test_handler_installed_once_across_calls():
    get_logger("core.store")
    configure_logging("info")
    get_logger("analytics.stats")

    assert len(_subtrack_handlers()) == 1


def test_configure_logging_updates_level():
    configure_logging("warning")
    assert logging.getLogger().level == logging.WARNING

    configure_logging(logging.INFO)
    assert logging.getLogger().level == logging.INFO
