"""Centralized configuration for basejump.

This module defines:
- Base range and default bases
- Capacity limits for the interactive buffers
- The evaluator's exactness limit (2^53) and the numeral magnitude limit
- Key codes recognised by the interactive session
- Process exit codes used by the CLI
- Regex patterns for validating numbers and base lists

Limits can be overridden via environment variables prefixed with BASEJUMP_.
"""

import os
import re
import sys

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("basejump")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

PROG_NAME = "basejump"

# Base range
MIN_BASE = 2
MAX_BASE = 36
MAX_OUTPUT_BASES = MAX_BASE  # one slot per possible base

DEFAULT_INPUT_BASE = 10
DEFAULT_OUTPUT_BASES = (2, 10, 16)

# Buffer capacities (can be overridden via environment variables)
MAX_INPUT_LENGTH = int(os.getenv("BASEJUMP_MAX_INPUT_LENGTH", "64"))  # characters
MAX_COMMAND_LENGTH = int(
    os.getenv("BASEJUMP_MAX_COMMAND_LENGTH", "128")
)  # one slot is reserved, so commands hold at most 127 characters
# Nested parentheses / exponent chains; each level costs several frames
MAX_EXPRESSION_DEPTH = min(
    int(os.getenv("BASEJUMP_MAX_EXPRESSION_DEPTH", "100")),
    sys.getrecursionlimit() // 8,
)

# Largest integer exactly representable by the evaluator's float accumulator
RESULT_LIMIT = 2**53
# Numerals are unsigned 64-bit magnitudes
MAGNITUDE_LIMIT = 2**64

# Keys
ENTER = "\n"
ESCAPE = "\x1b"
BACKSPACE = "\x7f"
END_OF_TRANSMISSION = "\x04"
COMMAND_PREFIX = ":"

# Commands (first character of the command buffer)
CMD_INPUT_BASE = "i"
CMD_OUTPUT_BASES = "o"
CMD_HISTORY = "h"

OPERATORS = frozenset("+-*/%^()")
INTERACTIVE_OPERATORS = frozenset("+-*/")

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_OPEN_FILE = 13
EXIT_INVALID_ARGS = 17

DIGITS_ONLY_REGEX = re.compile(r"[0-9]+")
# Decimal floating literal with an optional leading sign
NUMBER_REGEX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

CLEAR_SCREEN = "\033[2J\033[H"
