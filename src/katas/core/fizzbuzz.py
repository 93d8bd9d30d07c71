from collections.abc import Iterator

DEFAULT_BOUND = 100

# Fixed output of the fizzbuzz driver
DRIVER_BOUND = 15
START_MARKER = "Running FizzBuzz..."
END_MARKER = "FizzBuzz complete!"


def label(i: int) -> str:
    """
    "FizzBuzz" for multiples of 15, "Fizz" for multiples of 3,
    "Buzz" for multiples of 5, otherwise the number itself.
    """
    if i % 15 == 0:
        return "FizzBuzz"
    elif i % 3 == 0:
        return "Fizz"
    elif i % 5 == 0:
        return "Buzz"
    else:
        return str(i)


def fizzbuzz(bound: int = DEFAULT_BOUND) -> Iterator[str]:
    # bound <= 0 yields nothing
    for i in range(1, bound + 1):
        yield label(i)
