"""Package logger: colored NOTICE+ on stdout, everything under ``logs/mailcanvas.log``."""

import logging
import os
import sys
from typing import Any

NOTICE_LEVEL = 25
logging.addLevelName(NOTICE_LEVEL, "NOTICE")

LOGGER_NAME = "mailcanvas"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_DIR = os.environ.get(
    "MAILCANVAS_LOG_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "../../../logs"),
)
LOG_FILE = os.path.join(LOG_DIR, "mailcanvas.log")

RESET = "\033[0m"
LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "NOTICE": "\033[38;5;33m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[1;41m",
}


class ColorFormatter(logging.Formatter):
    """Colors the level name. Formats a copy so other handlers see the plain record."""

    def format(self, record: logging.LogRecord) -> str:
        colored = logging.makeLogRecord(record.__dict__)
        color = LEVEL_COLORS.get(record.levelname, "")
        colored.levelname = f"{color}{record.levelname:<7}{RESET}"
        return super().format(colored)


class CustomLogger(logging.Logger):
    """info() logs at NOTICE, so progress messages reach the console."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        super().log(NOTICE_LEVEL, msg, *args, **kwargs)


logging.setLoggerClass(CustomLogger)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(NOTICE_LEVEL)
    handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler() -> logging.Handler:
    os.makedirs(LOG_DIR, exist_ok=True)
    handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure() -> logging.Logger:
    # Root logger belongs to the host application
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    package_logger.handlers.clear()
    package_logger.addHandler(_console_handler())
    package_logger.addHandler(_file_handler())
    package_logger.propagate = False
    return package_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Child of the package logger, e.g. ``get_logger(__name__)``."""
    if name and not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name or LOGGER_NAME)


logger = _configure()
