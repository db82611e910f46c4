"""
Logging helpers for the MRN generator.

Every module gets a named logger under ``mrn_generator``. A single stream
handler is attached to the package logger the first time logging is set up,
and its level is taken from the ``MRN_LOG_LEVEL`` environment variable.
"""

import logging
import os

from mrn_generator.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

_ROOT_LOGGER_NAME = "mrn_generator"


def setup_logging(level: str = None) -> logging.Logger:
    """Setup logging configuration for the package logger."""
    root = logging.getLogger(_ROOT_LOGGER_NAME)

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not root.handlers:
        handler = logging.StreamHandler()

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def log_event(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
