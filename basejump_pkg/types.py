"""Type definitions, result dataclasses and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    value: int | None = None
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, code={self.code!r}, error={self.error!r})"
        return f"EvalResult(ok=True, value={self.value!r})"


@dataclass(frozen=True)
class HistoryEntry:
    """A recorded successful evaluation."""

    expression: str
    base: int
    result: int


class BaseJumpError(Exception):
    """Base class for all basejump errors."""

    default_code = "ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ConversionError(BaseJumpError):
    """Raised when a numeral or expression cannot be converted between bases."""

    default_code = "CONVERSION_ERROR"


class InvalidBaseError(ConversionError):
    """Raised when a base lies outside 2..36."""

    default_code = "INVALID_BASE"


class InvalidDigitError(ConversionError):
    """Raised when a character is not a legal digit for the declared base."""

    default_code = "INVALID_DIGIT"


class NumeralOverflowError(ConversionError):
    """Raised when a magnitude does not fit in an unsigned 64-bit value."""

    default_code = "NUMERAL_OVERFLOW"


class InvalidCharacterError(ConversionError):
    """Raised when an expression holds a character outside digits, operators and whitespace."""

    default_code = "INVALID_CHARACTER"


class EvaluationError(BaseJumpError):
    """Raised when an arithmetic expression cannot be evaluated."""

    default_code = "EVALUATION_ERROR"


class ParseError(EvaluationError):
    """Raised when arithmetic syntax is malformed."""

    default_code = "PARSE_ERROR"


class TrailingInputError(ParseError):
    """Raised when text remains after a complete expression."""

    default_code = "TRAILING_INPUT"


class DivisionByZeroError(EvaluationError):
    """Raised on division or modulo by zero."""

    default_code = "DIVISION_BY_ZERO"


class ResultOutOfRangeError(EvaluationError):
    """Raised when a result is negative, not finite, or not below 2^53."""

    default_code = "RESULT_OUT_OF_RANGE"


class ConfigurationError(BaseJumpError):
    """Raised when command-line or command-mode settings are invalid."""

    default_code = "INVALID_ARGS"
