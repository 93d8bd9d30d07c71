import logging

import pytest

from katas.shared.logger import PACKAGE_LOGGER


@pytest.fixture
def first_fifteen():
    return [
        "1", "2", "Fizz", "4", "Buzz",
        "Fizz", "7", "8", "Fizz", "Buzz",
        "11", "Fizz", "13", "14", "FizzBuzz",
    ]


@pytest.fixture
def file_handlers():
    """Drop any file handler a test attached to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    yield package_logger
    for handler in list(package_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            package_logger.removeHandler(handler)
            handler.close()
