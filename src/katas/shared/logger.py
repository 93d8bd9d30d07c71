import logging
import re
import sys
from datetime import datetime
from pathlib import Path

from colorama import Fore, Style, init

PACKAGE_LOGGER = "katas"

FORMAT_STRING_CONSOLE = (
    f"{Style.BRIGHT}%(levelname)-10s "
    + f"{Style.DIM}%(name)-20s "
    + "%(module)s.%(funcName)-30s "
    + f"{Style.RESET_ALL}%(message)s"
)
FORMAT_STRING_FILE = re.sub(
    r"\x1b\[[0-9;]*m", "", "%(asctime)s - " + FORMAT_STRING_CONSOLE
)


# Create colored console handler
class ColorFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.color_map = {
            logging.DEBUG: Fore.CYAN,
            logging.INFO: Fore.GREEN,
            logging.WARNING: Fore.YELLOW,
            logging.ERROR: Fore.RED,
            logging.CRITICAL: Fore.MAGENTA,
        }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        message = super().format(record)
        return f"{color}{message}{Style.RESET_ALL}"


class Logger:
    """Module loggers propagate to the package logger, which owns the handlers.

    The console handler goes to stderr; stdout belongs to the drivers.
    A dated file handler is only added when `log_file` is given.
    """

    def __init__(self, name, log_file=None, level=logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if not package_logger.handlers:
            # Initialize colorama
            init()

            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(ColorFormatter(FORMAT_STRING_CONSOLE))
            package_logger.addHandler(console_handler)
            package_logger.propagate = False

        if log_file is not None:
            add_file_handler(package_logger, log_file)

    def get_logger(self):
        return self.logger


def add_file_handler(logger: logging.Logger, log_file) -> logging.FileHandler:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return handler

    Path(log_file).mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(
        Path(log_file) / f"{datetime.now().strftime('%Y-%m-%d')}.log", delay=True
    )
    file_handler.setFormatter(logging.Formatter(FORMAT_STRING_FILE))
    logger.addHandler(file_handler)
    return file_handler
