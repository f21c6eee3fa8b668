"""Validated run configuration and the base/base-list validators.

The same validators serve the command line (where a failure is fatal) and
the interactive ``:i`` / ``:o`` commands (where a failure is ignored).
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import (
    DEFAULT_INPUT_BASE,
    DEFAULT_OUTPUT_BASES,
    DIGITS_ONLY_REGEX,
    MAX_BASE,
    MAX_OUTPUT_BASES,
    MIN_BASE,
)
from .types import ConfigurationError


@dataclass(frozen=True)
class Configuration:
    """Settings the core runs with; every field already satisfies its invariants."""

    input_base: int = DEFAULT_INPUT_BASE
    output_bases: tuple[int, ...] = DEFAULT_OUTPUT_BASES
    file_path: str | None = None

    @property
    def interactive(self) -> bool:
        return self.file_path is None


def in_range(base: int) -> bool:
    return MIN_BASE <= base <= MAX_BASE


def parse_base(text: str) -> int:
    """Parse a single base written as decimal digits.

    Args:
        text: e.g. "16"

    Returns:
        The base as an int in 2..36

    Raises:
        ConfigurationError: If text is empty, not all ASCII digits, or out of range
    """
    if not DIGITS_ONLY_REGEX.fullmatch(text):
        raise ConfigurationError(f"Base '{text}' is not a decimal number")
    base = int(text)
    if not in_range(base):
        raise ConfigurationError(f"Base {base} is outside {MIN_BASE}..{MAX_BASE}")
    return base


def parse_output_bases(text: str) -> tuple[int, ...]:
    """Parse a comma-separated list of output bases.

    The whole list is rejected on an empty string, a leading, trailing or
    doubled comma, a token that is not a base, a repeated base, or more than
    36 entries.

    Args:
        text: e.g. "2,8,16"

    Returns:
        The bases in the order given
    """
    if not text:
        raise ConfigurationError("Empty output base list")
    if text.startswith(",") or text.endswith(","):
        raise ConfigurationError(f"Output base list '{text}' has a stray comma")
    if ",," in text:
        raise ConfigurationError(f"Output base list '{text}' has an empty entry")

    bases: list[int] = []
    for token in text.split(","):
        base = parse_base(token)
        if base in bases:
            raise ConfigurationError(f"Output base {base} is repeated")
        if len(bases) >= MAX_OUTPUT_BASES:
            raise ConfigurationError(
                f"More than {MAX_OUTPUT_BASES} output bases given"
            )
        bases.append(base)
    return tuple(bases)
