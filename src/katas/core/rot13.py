"""
rot13
===============
shift each ASCII letter 13 places within its case's alphabet
leave everything else alone
applying it twice gives back the input
"""

ENCODED_MESSAGE = "Pbatenghyngvbaf ba ohvyqvat n pbqr-rqvgvat ntrag!"

SHIFT = 13
ALPHABET_SIZE = 26

UPPER_A = ord("A")
UPPER_Z = ord("Z")
LOWER_A = ord("a")
LOWER_Z = ord("z")


def rot13_char(char: str) -> str:
    code = ord(char)

    if UPPER_A <= code <= UPPER_Z:
        return chr(UPPER_A + (code - UPPER_A + SHIFT) % ALPHABET_SIZE)

    if LOWER_A <= code <= LOWER_Z:
        return chr(LOWER_A + (code - LOWER_A + SHIFT) % ALPHABET_SIZE)

    return char


def rot13(text: str) -> str:
    """Return `text` with every ASCII letter rotated by 13."""
    return "".join(rot13_char(char) for char in text)
