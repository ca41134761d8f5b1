# Path: config/log_setup.py
# Purpose: Configure process-wide logging for API and script entrypoints.
# Layer: config.
# Details: Library modules only create named loggers; entrypoints call configure_logging once.

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler used by every entrypoint."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
