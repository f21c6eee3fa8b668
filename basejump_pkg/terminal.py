"""Terminal input mode handling and the character source for interactive runs."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, TextIO

from .logging_config import get_logger

logger = get_logger("terminal")


def is_terminal(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def line_buffering_disabled(stream: TextIO) -> Iterator[bool]:
    """Switch a terminal to character-at-a-time input without echo.

    The original attributes are restored on every exit path, including
    exceptions and KeyboardInterrupt. Streams that are not terminals are
    left alone.

    Yields:
        True if the terminal mode was changed
    """
    if not is_terminal(stream):
        yield False
        return

    import termios

    fd = stream.fileno()
    original = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)  # lflags
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    logger.debug("Line buffering disabled on fd %d", fd)
    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)
        logger.debug("Line buffering restored on fd %d", fd)


def read_chars(stream: TextIO) -> Iterator[str]:
    """Yield one character at a time until end of input."""
    while True:
        char = stream.read(1)
        if not char:
            return
        yield char
