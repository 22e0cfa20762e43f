"""
Demo Setup Logging Configuration

Configurable logging with debug mode support.
"""

import os
import logging
import sys
from pathlib import Path
from typing import Optional

from demo_setup.wizard.ui import mask_secrets


ROOT_LOGGER = "demo_setup"


def is_debug_mode() -> bool:
    """Check the DEMO_SETUP_DEBUG environment variable."""
    return os.environ.get("DEMO_SETUP_DEBUG", "").lower() in ("1", "true", "yes")


class SecretMaskingFormatter(logging.Formatter):
    """Formatter that masks secrets in log messages."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        return mask_secrets(message)


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level (default: DEBUG if DEMO_SETUP_DEBUG, else WARNING)
        log_file: Optional path to log file
        quiet: If True, suppress console output

    Returns:
        Configured logger
    """
    debug = is_debug_mode() or level == logging.DEBUG
    if level is None:
        level = logging.DEBUG if debug else logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if log_file else level)
    logger.propagate = False

    logger.handlers.clear()

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)

        if debug:
            console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        else:
            console_format = "%(message)s"

        console_handler.setFormatter(SecretMaskingFormatter(console_format))
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_format = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
        file_handler.setFormatter(SecretMaskingFormatter(file_format))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger under the demo_setup hierarchy.

    Args:
        name: Logger name (will be prefixed with 'demo_setup.')
    """
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
