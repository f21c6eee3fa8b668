"""Text rendering for the calculator: snapshots, results, history and banners.

The ``format_*`` functions are pure and return lists of lines, so output can
be checked without a terminal. ``TerminalDisplay`` writes those lines to a
pair of streams and is what the session talks to at run time.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from .config import CLEAR_SCREEN, PROG_NAME
from .converter import decode, encode
from .types import ConversionError, HistoryEntry


@dataclass(frozen=True)
class Snapshot:
    """Everything needed to redraw the input screen."""

    input_base: int
    expression: str
    input: str
    output_bases: tuple[int, ...]


def format_expression(base: int, expression: str) -> str:
    return f"Expression (base {base}): {expression}"


def format_result_line(base: int, digits: str) -> str:
    return f"Result (base {base}): {digits}"


def format_base_line(base: int, digits: str) -> str:
    return f"Base {base}: {digits}"


def format_error(expression: str) -> str:
    return f'Cannot evaluate the expression "{expression}"'


def format_snapshot(snapshot: Snapshot) -> list[str]:
    """Lines for the input screen.

    The value of the pending input is shown in every output base; it reads
    as 0 while the input is empty or too large to convert.
    """
    value = 0
    if snapshot.input:
        try:
            value = decode(snapshot.input, snapshot.input_base)
        except ConversionError:
            value = 0
    lines = [
        format_expression(snapshot.input_base, snapshot.expression),
        f"Input (base {snapshot.input_base}): {snapshot.input}",
    ]
    lines.extend(
        format_base_line(base, encode(value, base)) for base in snapshot.output_bases
    )
    return lines


def format_result(
    base: int, expression: str, result: int, output_bases: Iterable[int]
) -> list[str]:
    """Lines for an evaluated expression: the expression, its result, then every output base."""
    lines = [
        format_expression(base, expression),
        format_result_line(base, encode(result, base)),
    ]
    lines.extend(format_base_line(b, encode(result, b)) for b in output_bases)
    return lines


def format_history(entries: Iterable[HistoryEntry]) -> list[str]:
    """Lines for the history listing, each entry in the base it was evaluated in."""
    lines: list[str] = []
    for entry in entries:
        lines.append(format_expression(entry.base, entry.expression))
        lines.append(format_result_line(entry.base, encode(entry.result, entry.base)))
    return lines


def format_banner(
    input_base: int, output_bases: Iterable[int], interactive: bool
) -> list[str]:
    lines = [
        f"Welcome to {PROG_NAME}.",
        f"Input base: {input_base}",
        "Output bases: " + ", ".join(str(base) for base in output_bases),
    ]
    if interactive:
        lines.append("Please enter your numbers and expressions.")
    return lines


def format_farewell() -> str:
    return f"Thank you for using {PROG_NAME}!"


class TerminalDisplay:
    """Display sink writing to an output and an error stream.

    The screen is cleared before each redraw only when ``clear_screen`` is
    set, which the CLI does when stdin is a terminal.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        clear_screen: bool = False,
    ):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.clear_screen = clear_screen

    def _clear(self) -> None:
        if self.clear_screen:
            self.out.write(CLEAR_SCREEN)

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.out.write(line + "\n")
        self.out.flush()

    def render(self, snapshot: Snapshot) -> None:
        self._clear()
        self._write_lines(format_snapshot(snapshot))

    def show_result(
        self, base: int, expression: str, result: int, output_bases: Iterable[int]
    ) -> None:
        self._clear()
        self._write_lines(format_result(base, expression, result, output_bases))

    def show_history(self, entries: Iterable[HistoryEntry]) -> None:
        self._clear()
        self._write_lines(format_history(entries))

    def show_error(self, expression: str) -> None:
        self.err.write(format_error(expression) + "\n")
        self.err.flush()

    def show_banner(
        self, input_base: int, output_bases: Iterable[int], interactive: bool
    ) -> None:
        if interactive:
            self._clear()
        self._write_lines(format_banner(input_base, output_bases, interactive))

    def show_farewell(self) -> None:
        self._write_lines([format_farewell()])
