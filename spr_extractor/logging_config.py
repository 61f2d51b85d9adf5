#!/usr/bin/env python3
"""
Logging configuration for the sprite extractor
Provides consistent logging setup across all modules
"""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "spr_extractor"


def setup_logging(level: str = "INFO",
                  log_file: str | None = None) -> logging.Logger:
    """
    Setup logging configuration for the extractor.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to (defaults to console only)

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Clear any existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not create log file {log_file}: {e}")

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'archive' or __name__)

    Returns:
        Logger instance
    """
    if name.startswith(f"{LOGGER_NAME}."):
        name = name[len(LOGGER_NAME) + 1:]
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
