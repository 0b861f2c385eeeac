import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import json

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logger(level: Optional[str] = None) -> None:
    """
    Configure logging for the command line tool.

    Logs go to stderr so that standard output only carries the activity report.

    :param level: Log level name, falls back to LOG_LEVEL and then WARNING.
    :return: None
    """
    log_level = level or os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # stdout carries the activity report and user-facing errors, logs stay on stderr
    handler = logging.StreamHandler(sys.stderr)
    formatter = json.JsonFormatter(
        "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
    )
    handler.setFormatter(formatter)

    if not root_logger.handlers:
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the application.
    :param name: The name of the logger.
    :return: Logger object.
    """
    return logging.getLogger(name)
