"""
Centralized logging configuration for orderpad.

Every module logs through ``logging.getLogger(__name__)``; since all of
them live under the ``orderpad`` package, configuring the ``orderpad``
logger here covers the whole application.

Log Format:
    2024-06-01 10:15:30 [INFO    ] orderpad.application.order_wizard - Wizard CLIENT -> PRODUCTS

Usage:
    from orderpad.infrastructure.logging_config import setup_logging

    setup_logging(log_level=logging.INFO, enable_file_logging=True)
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    app_name: str = "orderpad",
    log_level: int | str = logging.WARNING,
    log_dir: Path | None = None,
    enable_file_logging: bool = False,
) -> logging.Logger:
    """
    Configure application logging.

    This sets up:
    1. Console handler (always enabled, on stderr so CLI output stays clean)
    2. Rotating file handler (optional) - for persistent logs
    3. Error file handler (optional) - for ERROR/CRITICAL only

    Calling it again replaces the previous handlers.

    Args:
        app_name: Name of the application logger (default: "orderpad")
        log_level: Minimum log level, as an int or a level name
        log_dir: Directory for log files (default: ./logs)
        enable_file_logging: Whether to write to log files (default: False)

    Returns:
        Configured application logger
    """
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.WARNING

    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)
    logger.propagate = False  # Prevent duplicate logs to root logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if enable_file_logging:
        log_dir = log_dir or Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)

        app_log_file = log_dir / f"{app_name}.log"
        file_handler = RotatingFileHandler(
            filename=app_log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB per file
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            filename=log_dir / f"{app_name}_error.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        logger.addHandler(error_handler)

        logger.info("File logging enabled: %s", app_log_file)

    logger.debug("Logging configured at level %s", logging.getLevelName(log_level))
    return logger
