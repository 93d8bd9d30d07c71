import argparse

from katas.core import (
    DRIVER_BOUND,
    ENCODED_MESSAGE,
    END_MARKER,
    START_MARKER,
    fizzbuzz,
    rot13,
)
from katas.shared import Logger

logger = Logger(__name__).get_logger()


# ================================================================================
#       Drivers
# ================================================================================
def congrats(message: str = ENCODED_MESSAGE) -> str:
    """Decode the ROT13 message and print it once."""
    decoded = rot13(message)
    logger.debug(f"Decoded {len(message)} characters")
    print(decoded)
    return decoded


def run_fizzbuzz(bound: int = DRIVER_BOUND) -> list[str]:
    """Print the start marker, one label per line, then the end marker."""
    logger.debug(f"Running fizzbuzz with bound={bound}")

    print(START_MARKER)
    labels = []
    for item in fizzbuzz(bound):
        print(item)
        labels.append(item)
    print(END_MARKER)

    return labels


def congrats_main():
    congrats()


def fizzbuzz_main():
    run_fizzbuzz()


# ================================================================================
#       Command Line
# ================================================================================
def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="katas",
        description="ROT13 decoder and FizzBuzz printer",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("congrats", help="Decode and print the ROT13 message")

    fizzbuzz_parser = subparsers.add_parser(
        "fizzbuzz", help="Print the FizzBuzz sequence"
    )
    fizzbuzz_parser.add_argument(
        "--bound",
        type=int,
        default=DRIVER_BOUND,
        help=f"Last number of the sequence (default: {DRIVER_BOUND})",
    )

    rot13_parser = subparsers.add_parser("rot13", help="Apply ROT13 to some text")
    rot13_parser.add_argument("text", nargs="+", help="Words to transform")

    subparsers.add_parser("serve", help="Start the HTTP server")

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.command == "congrats":
        congrats()

    elif args.command == "fizzbuzz":
        run_fizzbuzz(args.bound)

    elif args.command == "rot13":
        print(rot13(" ".join(args.text)))

    elif args.command == "serve":
        # Only the server reads config.toml
        from katas.main import serve

        serve()


if __name__ == "__main__":
    main()
