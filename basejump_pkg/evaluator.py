"""Recursive-descent evaluator for decimal arithmetic expressions.

Grammar, lowest precedence first::

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/' | '%') factor)*
    factor     := ('+' | '-')? power
    power      := primary ('^' power)?
    primary    := number | '(' expression ')'

Values are accumulated as floats, so results are only exact below 2^53.
Anything negative or at/above that limit is rejected rather than clamped,
and accepted results are truncated toward zero. Overflow and domain errors
along the way become infinities and NaN; only the final value is range
checked, so ``1/10^400`` is 0.
"""

from __future__ import annotations

import math

from .config import MAX_EXPRESSION_DEPTH, NUMBER_REGEX, RESULT_LIMIT
from .logging_config import get_logger
from .types import (
    DivisionByZeroError,
    EvalResult,
    EvaluationError,
    ParseError,
    ResultOutOfRangeError,
    TrailingInputError,
)

logger = get_logger("evaluator")


def _pow(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent``, returning IEEE values instead of raising.

    Overflow gives an infinity signed as the exact power would be, and a
    domain error gives NaN (infinity for zero to a negative power). The
    range check on the final value rejects either if it survives.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if exponent.is_integer() and exponent % 2 == 1:
            return math.copysign(math.inf, base)
        return math.inf
    except ValueError:
        return math.inf if base == 0 else math.nan


class _Parser:
    """Cursor over the expression text; one method per grammar rule."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = 0

    def peek(self) -> str:
        self.skip_whitespace()
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def expression(self) -> float:
        result = self.term()
        while self.peek() in ("+", "-"):
            op = self.text[self.pos]
            self.pos += 1
            right = self.term()
            result = result + right if op == "+" else result - right
        return result

    def term(self) -> float:
        result = self.factor()
        while self.peek() in ("*", "/", "%"):
            op = self.text[self.pos]
            self.pos += 1
            right = self.factor()
            if op == "*":
                result *= right
                continue
            if right == 0:
                raise DivisionByZeroError(
                    "Division by zero" if op == "/" else "Modulo by zero"
                )
            if op == "/":
                result /= right
            else:
                try:
                    result = math.fmod(result, right)
                except ValueError:
                    # fmod of an infinite dividend
                    result = math.nan
        return result

    def factor(self) -> float:
        sign = self.peek()
        if sign in ("+", "-"):
            self.pos += 1
        value = self.power()
        return -value if sign == "-" else value

    def power(self) -> float:
        self.depth += 1
        if self.depth > MAX_EXPRESSION_DEPTH:
            raise ParseError(
                f"Expression nested deeper than {MAX_EXPRESSION_DEPTH} levels",
                "TOO_DEEP",
            )
        try:
            base = self.primary()
            if self.peek() != "^":
                return base
            self.pos += 1
            exponent = self.power()
            return _pow(base, exponent)
        finally:
            self.depth -= 1

    def primary(self) -> float:
        char = self.peek()
        if char == "(":
            self.pos += 1
            value = self.expression()
            if self.peek() != ")":
                raise ParseError(f"Expected ')' at position {self.pos}")
            self.pos += 1
            return value
        return self.number()

    def number(self) -> float:
        self.skip_whitespace()
        match = NUMBER_REGEX.match(self.text, self.pos)
        if not match:
            if self.pos >= len(self.text):
                raise ParseError("Unexpected end of expression")
            raise ParseError(
                f"Expected a number at position {self.pos}, found '{self.text[self.pos]}'"
            )
        self.pos = match.end()
        return float(match.group())


def parse(text: str) -> float:
    """Parse and compute a decimal expression, returning the raw float value.

    Overflow and domain errors do not raise here; they leave an infinite or
    NaN value for ``to_result`` to reject.

    Raises:
        ParseError: On malformed syntax (TrailingInputError for leftovers,
            code TOO_DEEP for nesting beyond the depth limit)
        DivisionByZeroError: On '/' or '%' by zero
    """
    parser = _Parser(text)
    try:
        value = parser.expression()
    except RecursionError:
        raise ParseError("Expression nested too deeply", "TOO_DEEP")
    parser.skip_whitespace()
    if parser.pos < len(text):
        raise TrailingInputError(
            f"Unexpected '{text[parser.pos:]}' after expression"
        )
    return value


def to_result(value: float) -> int:
    """Check a raw float against the exactness limit and truncate it to an integer."""
    if not math.isfinite(value):
        raise ResultOutOfRangeError("Result is not a finite number")
    if value < 0:
        raise ResultOutOfRangeError(f"Result {value!r} is negative")
    if value >= RESULT_LIMIT:
        raise ResultOutOfRangeError(f"Result {value!r} is not below 2^53")
    return int(value)


def evaluate(text: str) -> EvalResult:
    """Evaluate a decimal arithmetic expression.

    Args:
        text: Expression using decimal literals, e.g. "2+3*4", "(2+3)*4", "2^3^2"

    Returns:
        EvalResult with ``value`` on success, or ``error``/``code`` on failure

    Example:
        >>> evaluate("2^3^2").value
        512
        >>> evaluate("5/0").code
        'DIVISION_BY_ZERO'
    """
    try:
        value = to_result(parse(text))
    except EvaluationError as e:
        logger.debug("Cannot evaluate %r: %s (%s)", text, e.message, e.code)
        return EvalResult(ok=False, error=e.message, code=e.code)
    return EvalResult(ok=True, value=value)
