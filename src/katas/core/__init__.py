# Pure routines with no I/O:
# - ROT13 substitution
# - FizzBuzz labelling
from .fizzbuzz import (
    DEFAULT_BOUND,
    DRIVER_BOUND,
    END_MARKER,
    START_MARKER,
    fizzbuzz,
    label,
)
from .rot13 import ENCODED_MESSAGE, rot13, rot13_char

__all__ = [
    "DEFAULT_BOUND",
    "DRIVER_BOUND",
    "ENCODED_MESSAGE",
    "END_MARKER",
    "START_MARKER",
    "fizzbuzz",
    "label",
    "rot13",
    "rot13_char",
]
