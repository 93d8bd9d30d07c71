from .fizzbuzz import FizzBuzzRequest, FizzBuzzResponse
from .rot13 import Rot13Request, Rot13Response

__all__ = [
    "FizzBuzzRequest",
    "FizzBuzzResponse",
    "Rot13Request",
    "Rot13Response",
]
