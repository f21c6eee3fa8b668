"""Rewrite every numeral inside an expression from one base to another."""

from __future__ import annotations

from .config import OPERATORS
from .converter import check_base, decode, encode, is_valid_digit
from .types import InvalidCharacterError


def is_operator(char: str) -> bool:
    """Check whether ``char`` is one of ``+ - * / % ^ ( )``."""
    return char in OPERATORS


def transcode(expression: str, source_base: int, target_base: int) -> str:
    """Convert all numerals in an expression between bases.

    Numerals are the maximal runs of characters that are valid digits under
    ``source_base``; a letter that is a digit of a large base therefore joins
    the surrounding run. Operators and whitespace are copied unchanged.

    Args:
        expression: Expression text, e.g. "FF + 1"
        source_base: Base the numerals are written in
        target_base: Base to rewrite the numerals into

    Returns:
        The rewritten expression, e.g. "255 + 1" for target base 10

    Raises:
        InvalidCharacterError: If a character is neither a digit of
            ``source_base``, an operator, nor whitespace
        ConversionError: If a numeral cannot be converted
    """
    check_base(source_base)
    check_base(target_base)

    pieces: list[str] = []
    i = 0
    length = len(expression)
    while i < length:
        char = expression[i]
        if is_valid_digit(char, source_base):
            start = i
            while i < length and is_valid_digit(expression[i], source_base):
                i += 1
            pieces.append(encode(decode(expression[start:i], source_base), target_base))
        elif is_operator(char) or char.isspace():
            pieces.append(char)
            i += 1
        else:
            raise InvalidCharacterError(
                f"Invalid character '{char}' at position {i} for base {source_base}"
            )
    return "".join(pieces)
