"""Numeral conversion between digit strings and unsigned magnitudes.

Digits are '0'-'9' followed by the letters 'A'-'Z' (either case on input,
uppercase on output), giving the 36 symbols of bases 2 through 36.
"""

from __future__ import annotations

import string

from .config import MAGNITUDE_LIMIT, MAX_BASE, MIN_BASE
from .types import InvalidBaseError, InvalidDigitError, NumeralOverflowError

DIGIT_ALPHABET = string.digits + string.ascii_uppercase


def check_base(base: int) -> int:
    """Return ``base`` unchanged, raising InvalidBaseError if it is outside 2..36."""
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(f"Base {base} is outside {MIN_BASE}..{MAX_BASE}")
    return base


def digit_value(char: str) -> int | None:
    """Map a digit character to its value.

    Args:
        char: A single character

    Returns:
        0-9 for '0'-'9', 10-35 for letters of either case, None otherwise
    """
    if len(char) != 1 or not char.isascii():
        return None
    if char.isdigit():
        return ord(char) - ord("0")
    if char.isalpha():
        return ord(char.upper()) - ord("A") + 10
    return None


def digit_char(value: int) -> str:
    """Map a digit value in 0..35 to its character (letters are uppercase)."""
    if not 0 <= value < len(DIGIT_ALPHABET):
        raise InvalidDigitError(f"Digit value {value} has no character")
    return DIGIT_ALPHABET[value]


def is_valid_digit(char: str, base: int) -> bool:
    """Check whether ``char`` is a legal digit under ``base``."""
    value = digit_value(char)
    return value is not None and value < base


def decode(digits: str, base: int) -> int:
    """Decode a digit string in the given base to its magnitude.

    Args:
        digits: Non-empty digit string (e.g., "FF", "1010")
        base: Base of the digits (2-36)

    Returns:
        The unsigned magnitude

    Raises:
        InvalidBaseError: If base is outside 2..36
        InvalidDigitError: If digits is empty or holds a character that is
            not a digit of the base
        NumeralOverflowError: If the magnitude does not fit in 64 bits
    """
    check_base(base)
    if not digits:
        raise InvalidDigitError("Empty numeral")

    magnitude = 0
    for char in digits:
        value = digit_value(char)
        if value is None or value >= base:
            raise InvalidDigitError(f"'{char}' is not a valid digit in base {base}")
        magnitude = magnitude * base + value
        if magnitude >= MAGNITUDE_LIMIT:
            raise NumeralOverflowError(
                f"'{digits}' in base {base} does not fit in 64 bits"
            )
    return magnitude


def encode(magnitude: int, base: int) -> str:
    """Encode a magnitude as a minimal digit string in the given base.

    Args:
        magnitude: Value in 0 .. 2^64-1
        base: Target base (2-36)

    Returns:
        Digit string without leading zeros ("0" for zero)
    """
    check_base(base)
    if magnitude < 0 or magnitude >= MAGNITUDE_LIMIT:
        raise NumeralOverflowError(f"{magnitude} is not an unsigned 64-bit value")
    if magnitude == 0:
        return "0"

    digits = []
    while magnitude > 0:
        magnitude, remainder = divmod(magnitude, base)
        digits.append(digit_char(remainder))
    digits.reverse()
    return "".join(digits)


def normalize(digits: str, base: int) -> str:
    """Round-trip a numeral through its magnitude: uppercase, no leading zeros."""
    return encode(decode(digits, base), base)
