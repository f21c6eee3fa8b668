"""Public API for basejump - returns structured objects without side effects."""

from __future__ import annotations

from typing import Iterable

from .config import DEFAULT_INPUT_BASE
from .converter import decode, encode
from .evaluator import evaluate as _evaluate_decimal
from .transcoder import transcode
from .types import ConversionError, EvalResult


def evaluate(expression: str) -> EvalResult:
    """Evaluate a decimal arithmetic expression.

    Args:
        expression: Expression string (e.g., "2+3*4", "(2+3)*4")

    Returns:
        EvalResult with the integral value
    """
    return _evaluate_decimal(expression)


def evaluate_in_base(expression: str, base: int = DEFAULT_INPUT_BASE) -> EvalResult:
    """Evaluate an expression whose numerals are written in ``base``.

    Args:
        expression: Expression string (e.g., "FF+1" in base 16)
        base: Base of every numeral in the expression (2-36)

    Returns:
        EvalResult with the value, or the conversion/evaluation error

    Example:
        >>> from basejump_pkg.api import evaluate_in_base
        >>> evaluate_in_base("FF+1", 16).value
        256
        >>> evaluate_in_base("12", 2).code
        'INVALID_CHARACTER'
    """
    try:
        decimal_text = transcode(expression, base, 10)
    except ConversionError as e:
        return EvalResult(ok=False, error=e.message, code=e.code)
    return _evaluate_decimal(decimal_text)


def convert(digits: str, from_base: int, to_base: int) -> str:
    """Convert a single numeral between bases.

    Example:
        >>> from basejump_pkg.api import convert
        >>> convert("ff", 16, 2)
        '11111111'
    """
    return encode(decode(digits, from_base), to_base)


def validate_expression(
    expression: str, base: int = DEFAULT_INPUT_BASE
) -> tuple[bool, str | None]:
    """Check that an expression only holds digits of ``base``, operators and whitespace.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        transcode(expression, base, base)
        return True, None
    except ConversionError as e:
        return False, str(e)


def results_by_base(value: int, bases: Iterable[int]) -> list[tuple[int, str]]:
    """Encode ``value`` in each of ``bases``, keeping their order."""
    return [(base, encode(value, base)) for base in bases]
