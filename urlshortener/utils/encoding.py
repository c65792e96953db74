import re
from typing import Callable

from nanoid import generate

# Base62 alphabet (case-sensitive codes)
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
SHORT_CODE_LENGTH = 8

CUSTOM_CODE_MIN_LENGTH = 4
CUSTOM_CODE_MAX_LENGTH = 15
CUSTOM_CODE_PATTERN = re.compile(r"[A-Za-z0-9]+")


def generate_short_code() -> str:
    """Generate a random 8-character base62 code."""
    return generate(ALPHABET, SHORT_CODE_LENGTH)


def generate_unique_code(is_taken: Callable[[str], bool]) -> str:
    """Draw codes until one is not taken.

    There is no retry bound: with 62**8 possible codes a collision streak is
    not a practical concern for an in-memory registry.
    """
    code = generate_short_code()
    while is_taken(code):
        code = generate_short_code()
    return code


def is_valid_custom_code(code: str) -> bool:
    """Alphanumeric only, 4 to 15 characters."""
    if not isinstance(code, str) or not CUSTOM_CODE_PATTERN.fullmatch(code):
        return False
    return CUSTOM_CODE_MIN_LENGTH <= len(code) <= CUSTOM_CODE_MAX_LENGTH
