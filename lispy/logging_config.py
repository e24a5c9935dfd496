"""Logging configuration for lispy."""
import logging
import os
import sys
from typing import Optional


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configure logging for the interpreter.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, logs to stderr so that
            evaluation results on stdout stay clean.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    config = {
        'level': numeric_level,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['filename'] = log_file
    else:
        config['stream'] = sys.stderr

    logging.basicConfig(**config)
    logging.getLogger(__name__).info("Logging initialized at %s level", level.upper())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name, typically __name__ from the calling module
    """
    return logging.getLogger(name)
