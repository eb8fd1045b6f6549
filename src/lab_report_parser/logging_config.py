"""Logging configuration for the lab report parser."""

from __future__ import annotations

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: LogLevel = "INFO", verbose: bool = False) -> None:
    """Set up logging configuration for the application."""
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper())

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # Third-party loggers are only interesting when they fail
    logging.getLogger("openpyxl").setLevel(logging.WARNING)
    logging.getLogger("pandas").setLevel(logging.WARNING)
