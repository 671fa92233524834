# logger_utils.py - logging setup and timing helper for the CLI and loaders

import logging
import time
from typing import Optional

from colorama import Fore, Style
from colorama import init as colorama_init

PACKAGE_LOGGER = "fuzzy_index"
LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Formatter that colours the whole line by level on the console."""
    COLORS = {
        "DEBUG": Fore.LIGHTBLACK_EX,   # gray
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def __init__(self, use_color: bool = True):
        super().__init__(LOG_FORMAT, DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.COLORS.get(record.levelname)
        if self.use_color and color:
            return f"{color}{line}{Style.RESET_ALL}"
        return line


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, use_color: bool = True) -> logging.Logger:
    """
    Configure the package logger: coloured console output on stderr,
    plus a plain file handler when log_file is given.
    Calling it again replaces the handlers instead of stacking them.
    """
    colorama_init()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(ColorFormatter(use_color=use_color))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def time_block(label: str, logger: Optional[logging.Logger] = None) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("load corpus"):
            do_some_work()
    Logs how long the block took once it exits.
    """
    return _Timer(label, logger or logging.getLogger(PACKAGE_LOGGER))


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label: str, logger: logging.Logger):
        self.label = label
        self.logger = logger
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            self.logger.info("%s done: %.3fs", self.label, self.elapsed)
        else:
            self.logger.warning("%s failed after %.3fs", self.label, self.elapsed)
        return False
