"""
Logging configuration for the member query layer.

All modules should use ``get_logger(__name__)`` to obtain a logger. The
``got_members`` package logger is configured once from ``settings.logging``.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from got_members.config import settings

PACKAGE_LOGGER = "got_members"

_DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set up and configure the package logger

    Args:
        level: Logging level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    # If logger is already configured, return it
    if logger.handlers:
        return logger

    # Determine log level
    level_name = (level or settings.effective_log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(log_level)

    simple_formatter = logging.Formatter(settings.logging.format)

    # 1. Console handler
    if settings.logging.console_enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(simple_formatter)
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)

    # 2. Package log file
    if settings.logging.file_enabled:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.get_log_file_path(PACKAGE_LOGGER),
            maxBytes=10485760,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(logging.Formatter(_DETAILED_FORMAT))
        file_handler.setLevel(log_level)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger under the configured package logger

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        logging.Logger
    """
    setup_logging()
    return logging.getLogger(name)
