"""Interactive session: the keystroke-driven state machine of the calculator.

A ``Session`` owns all mutable state of one interactive run: the digits being
typed, the expression assembled so far, a pending colon command, the current
input base, the output bases and the history. It consumes one character at a
time through ``feed`` and reports everything it wants shown to a display sink.

States:
    IDLE              typing digits and operators
    COMMAND           after ':', collecting a command up to the newline
    RESULT_DISPLAYED  right after Enter; the next key decides whether input resumes

Commands (typed after ':' and ended with a newline):
    :i<base>          set the input base, e.g. ":i16"
    :o<b1>,<b2>,...   set the output bases, e.g. ":o2,8,10"
    :h                list the history
Invalid commands are ignored without feedback and leave the buffers as they were.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Protocol

from .api import evaluate_in_base
from .config import (
    BACKSPACE,
    CMD_HISTORY,
    CMD_INPUT_BASE,
    CMD_OUTPUT_BASES,
    COMMAND_PREFIX,
    DEFAULT_INPUT_BASE,
    DEFAULT_OUTPUT_BASES,
    END_OF_TRANSMISSION,
    ENTER,
    ESCAPE,
    INTERACTIVE_OPERATORS,
    MAX_COMMAND_LENGTH,
    MAX_INPUT_LENGTH,
)
from .converter import is_valid_digit, normalize
from .display import Snapshot
from .history import HistoryLog
from .logging_config import get_logger
from .options import Configuration, parse_base, parse_output_bases
from .types import ConfigurationError, ConversionError, HistoryEntry

logger = get_logger("session")


class Display(Protocol):
    """What the session needs from whatever draws the screen."""

    def render(self, snapshot: Snapshot) -> None: ...

    def show_result(
        self, base: int, expression: str, result: int, output_bases: Iterable[int]
    ) -> None: ...

    def show_history(self, entries: Iterable[HistoryEntry]) -> None: ...

    def show_error(self, expression: str) -> None: ...


class Mode(str, Enum):
    """Session states."""

    IDLE = "idle"
    COMMAND = "command"
    RESULT_DISPLAYED = "result_displayed"


class Session:
    """State machine for one interactive run."""

    def __init__(
        self,
        display: Display,
        input_base: int = DEFAULT_INPUT_BASE,
        output_bases: Iterable[int] = DEFAULT_OUTPUT_BASES,
        max_input_length: int = MAX_INPUT_LENGTH,
        max_command_length: int = MAX_COMMAND_LENGTH,
    ):
        self.display = display
        self.input_base = input_base
        self.output_bases = tuple(output_bases)
        self.max_input_length = max_input_length
        self.max_command_length = max_command_length

        self.mode = Mode.IDLE
        self.input_buffer = ""
        self.expression_buffer = ""
        self.command_buffer = ""
        self.history = HistoryLog()
        self.finished = False

    @classmethod
    def from_configuration(cls, configuration: Configuration, display: Display) -> Session:
        return cls(
            display,
            input_base=configuration.input_base,
            output_bases=configuration.output_bases,
        )

    def snapshot(self) -> Snapshot:
        return Snapshot(
            input_base=self.input_base,
            expression=self.expression_buffer,
            input=self.input_buffer,
            output_bases=self.output_bases,
        )

    def render(self) -> None:
        self.display.render(self.snapshot())

    def run(self, chars: Iterable[str]) -> None:
        """Feed characters until end of input or an end-of-transmission key."""
        for char in chars:
            if not self.feed(char):
                break
        self.finished = True

    def close(self) -> None:
        """Discard the session's history."""
        self.history.clear()
        self.finished = True

    def feed(self, char: str) -> bool:
        """Process one input character.

        Returns:
            False once the session has ended, True otherwise
        """
        if self.finished:
            return False
        if char == END_OF_TRANSMISSION:
            logger.debug("End of transmission received")
            self.finished = True
            return False

        if self.mode is Mode.RESULT_DISPLAYED:
            self.mode = Mode.IDLE
            if not self._resumes_input(char):
                # Clear the result off the screen and drop the key
                self.render()
                return True

        if self.mode is Mode.COMMAND:
            self._command_char(char)
        else:
            self._idle_char(char)
        return True

    def _resumes_input(self, char: str) -> bool:
        return (
            char in (COMMAND_PREFIX, ESCAPE, BACKSPACE, ENTER)
            or char in INTERACTIVE_OPERATORS
            or is_valid_digit(char, self.input_base)
        )

    # IDLE

    def _idle_char(self, char: str) -> None:
        if char == COMMAND_PREFIX:
            self.command_buffer = ""
            self.mode = Mode.COMMAND
        elif char == ESCAPE:
            self.input_buffer = ""
            self.expression_buffer = ""
            self.render()
        elif char == BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]
            self.render()
        elif char == ENTER:
            self._enter()
        elif char in INTERACTIVE_OPERATORS:
            self._operator(char)
        else:
            if (
                is_valid_digit(char, self.input_base)
                and len(self.input_buffer) < self.max_input_length
            ):
                self.input_buffer += char
            self.render()

    def _flush_input(self, default: str = "") -> bool:
        """Move the typed digits, normalized, onto the end of the expression.

        ``default`` is appended instead when nothing has been typed. On a
        conversion failure the typed digits are reported and discarded.
        """
        pending, self.input_buffer = self.input_buffer, ""
        if not pending:
            self.expression_buffer += default
            return True
        try:
            self.expression_buffer += normalize(pending, self.input_base)
        except ConversionError as e:
            logger.info("Cannot convert %r in base %d: %s", pending, self.input_base, e)
            self.display.show_error(pending)
            return False
        return True

    def _operator(self, char: str) -> None:
        if self._flush_input(default="0"):
            self.expression_buffer += char
        self.render()

    def _enter(self) -> None:
        flushed = self._flush_input()
        self.mode = Mode.RESULT_DISPLAYED
        if not flushed:
            self.expression_buffer = ""
            return
        if not self.expression_buffer:
            self.expression_buffer = "0"
        self._evaluate()

    def _evaluate(self) -> None:
        expression, self.expression_buffer = self.expression_buffer, ""
        result = evaluate_in_base(expression, self.input_base)
        if not result.ok:
            logger.info(
                "Cannot evaluate %r in base %d: %s", expression, self.input_base, result.error
            )
            self.display.show_error(expression)
            return
        self.history.append(expression, self.input_base, result.value)
        logger.info("%s (base %d) = %d", expression, self.input_base, result.value)
        self.display.show_result(
            self.input_base, expression, result.value, self.output_bases
        )

    # COMMAND

    def _command_char(self, char: str) -> None:
        if char != ENTER:
            if len(self.command_buffer) < self.max_command_length - 1:
                self.command_buffer += char
            return

        command, self.command_buffer = self.command_buffer, ""
        self.mode = Mode.IDLE
        if self._run_command(command):
            self.render()

    def _run_command(self, command: str) -> bool:
        """Execute a completed command; returns whether the input screen should be redrawn."""
        kind, argument = command[:1], command[1:]
        if kind == CMD_INPUT_BASE:
            self._set_input_base(argument)
        elif kind == CMD_OUTPUT_BASES:
            self._set_output_bases(argument)
        elif command == CMD_HISTORY:
            self.display.show_history(self.history)
            return False
        else:
            logger.debug("Ignoring unknown command %r", command)
        return True

    def _set_input_base(self, argument: str) -> None:
        try:
            base = parse_base(argument)
        except ConfigurationError as e:
            logger.debug("Ignoring input base command %r: %s", argument, e)
            return
        self.input_base = base
        self._clear_buffers()
        logger.debug("Input base set to %d", base)

    def _set_output_bases(self, argument: str) -> None:
        try:
            bases = parse_output_bases(argument)
        except ConfigurationError as e:
            logger.debug("Ignoring output bases command %r: %s", argument, e)
            return
        self.output_bases = bases
        self._clear_buffers()
        logger.debug("Output bases set to %s", bases)

    def _clear_buffers(self) -> None:
        self.input_buffer = ""
        self.expression_buffer = ""
