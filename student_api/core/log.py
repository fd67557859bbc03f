"""
Logger configuration.

One stdout handler on the root logger with timestamped lines.
Modules call get_logger(__name__) and never add handlers themselves.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "student_api"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging. Safe to call more than once: only the
    handler installed here is replaced, other handlers are left alone.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # pymongo logs every command at DEBUG/INFO
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
