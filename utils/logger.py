"""Logging setup for SubTrack.

The Streamlit entrypoint calls :func:`configure_logging` with the configured
level; library modules only ask for ``get_logger(__name__)``. A stdout handler
named ``subtrack`` is installed on the root logger the first time either is
used, and later calls only adjust the level.
"""

from __future__ import annotations

import logging
import logging.config

__all__ = ["LOG_FORMAT", "configure_logging", "get_logger"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "subtrack"


def _handler_installed() -> bool:
    return any(handler.get_name() == HANDLER_NAME for handler in logging.getLogger().handlers)


def configure_logging(level: str | int = "INFO") -> None:
    """Install the SubTrack stdout handler once and apply ``level`` to the root logger."""

    if isinstance(level, str):
        level = level.upper()

    if _handler_installed():
        logging.getLogger().setLevel(level)
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"plain": {"format": LOG_FORMAT}},
            "handlers": {
                HANDLER_NAME: {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {"level": level, "handlers": [HANDLER_NAME]},
        }
    )


def get_logger(name: str) -> logging.Logger:
    if not _handler_installed():
        configure_logging()
    return logging.getLogger(name)
