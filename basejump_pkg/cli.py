"""Command-line front end: argument handling, file mode and interactive mode."""

from __future__ import annotations

import argparse
import json
import signal
import sys
from typing import Any, TextIO

from .api import evaluate_in_base, results_by_base
from .config import (
    EXIT_FAILURE,
    EXIT_INVALID_ARGS,
    EXIT_OK,
    EXIT_OPEN_FILE,
    PROG_NAME,
    VERSION,
)
from .display import TerminalDisplay
from .logging_config import LOG_LEVELS, get_logger, setup_logging
from .options import Configuration, parse_base, parse_output_bases
from .session import Session
from .terminal import is_terminal, line_buffering_disabled, read_chars
from .types import ConfigurationError

logger = get_logger("cli")

USAGE = f"Usage: {PROG_NAME} [--obases 2..36] [--inputbase 2..36] [--file string]"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting, so the CLI controls the exit code."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigurationError(message)


class _StoreOnce(argparse.Action):
    """Store an option value, rejecting a second occurrence of the option."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest, None) is not None:
            raise argparse.ArgumentError(self, "may only be given once")
        setattr(namespace, self.dest, values)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG_NAME, allow_abbrev=False)
    parser.add_argument(
        "--inputbase",
        action=_StoreOnce,
        help="Base the expressions are written in (2..36, default: 10)",
    )
    parser.add_argument(
        "--obases",
        action=_StoreOnce,
        help="Comma-separated output bases (default: 2,10,16)",
    )
    parser.add_argument(
        "--file",
        action=_StoreOnce,
        help="Evaluate each line of a file instead of reading the keyboard",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format for --eval",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify the conversion and evaluation paths",
    )
    return parser


def build_configuration(args: argparse.Namespace) -> Configuration:
    """Validate parsed arguments into a Configuration.

    Raises:
        ConfigurationError: If any base, base list or file name is invalid
    """
    configuration = Configuration()
    if args.inputbase is not None:
        configuration = Configuration(
            input_base=parse_base(args.inputbase),
            output_bases=configuration.output_bases,
        )
    if args.obases is not None:
        configuration = Configuration(
            input_base=configuration.input_base,
            output_bases=parse_output_bases(args.obases),
        )
    if args.file is not None:
        if not args.file:
            raise ConfigurationError("Empty file name")
        configuration = Configuration(
            input_base=configuration.input_base,
            output_bases=configuration.output_bases,
            file_path=args.file,
        )
    return configuration


def evaluate_line(
    expression: str, configuration: Configuration, display: TerminalDisplay
) -> bool:
    """Evaluate one expression and show it with its result in every output base."""
    result = evaluate_in_base(expression, configuration.input_base)
    if not result.ok:
        logger.info("Cannot evaluate %r: %s", expression, result.error)
        display.show_error(expression)
        return False
    display.show_result(
        configuration.input_base, expression, result.value, configuration.output_bases
    )
    return True


def run_file(configuration: Configuration, display: TerminalDisplay) -> int:
    """Evaluate every line of the configured file; one bad line does not stop the rest."""
    path = configuration.file_path
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Cannot open %s: %s", path, e)
        print(f'{PROG_NAME}: can\'t read from file "{path}"', file=sys.stderr)
        return EXIT_OPEN_FILE

    with handle:
        display.show_banner(
            configuration.input_base, configuration.output_bases, interactive=False
        )
        has_content = False
        for line in handle:
            has_content = True
            evaluate_line(line.rstrip("\r\n"), configuration, display)
        if not has_content:
            display.show_error("")

    display.show_farewell()
    return EXIT_OK


def _raise_interrupt(signum: int, frame: Any) -> None:
    raise KeyboardInterrupt


def run_interactive(
    configuration: Configuration,
    stdin: TextIO | None = None,
    display: TerminalDisplay | None = None,
) -> int:
    """Run a keystroke-driven session on stdin until end of input.

    The terminal is put in character mode for the duration of the session
    and restored before the farewell is printed, whichever way the session
    ends (end of input, Ctrl-D, Ctrl-C or SIGTERM).
    """
    stdin = stdin if stdin is not None else sys.stdin
    if display is None:
        display = TerminalDisplay(clear_screen=is_terminal(stdin))

    display.show_banner(
        configuration.input_base, configuration.output_bases, interactive=True
    )
    session = Session.from_configuration(configuration, display)

    previous_handler = None
    try:
        previous_handler = signal.signal(signal.SIGTERM, _raise_interrupt)
    except ValueError:
        # Not in the main thread
        pass

    try:
        with line_buffering_disabled(stdin):
            session.run(read_chars(stdin))
    except KeyboardInterrupt:
        logger.debug("Session interrupted")
    finally:
        session.close()
        if previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)

    display.show_farewell()
    return EXIT_OK


def _eval_once(expression: str, configuration: Configuration, output_format: str) -> int:
    result = evaluate_in_base(expression, configuration.input_base)
    if output_format == "json":
        payload = result.to_dict()
        payload["expression"] = expression
        payload["base"] = configuration.input_base
        if result.ok:
            payload["bases"] = {
                str(base): digits
                for base, digits in results_by_base(
                    result.value, configuration.output_bases
                )
            }
        print(json.dumps(payload))
        return EXIT_OK if result.ok else EXIT_FAILURE

    display = TerminalDisplay()
    return EXIT_OK if evaluate_line(expression, configuration, display) else EXIT_FAILURE


def _health_check() -> int:
    """Run health check to verify the conversion and evaluation paths.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    from .api import convert, evaluate
    from .transcoder import transcode

    checks_passed = 0
    checks_failed = 0

    print(f"Running {PROG_NAME} health check...")
    print("-" * 50)

    checks = [
        ("Numeral conversion", lambda: convert("ff", 16, 2), "11111111"),
        ("Expression transcoding", lambda: transcode("FF+1", 16, 10), "255+1"),
        ("Operator precedence", lambda: evaluate("2+3*4").value, 14),
        ("Right-associative powers", lambda: evaluate("2^3^2").value, 512),
        ("Division by zero", lambda: evaluate("5/0").code, "DIVISION_BY_ZERO"),
    ]
    for name, check, expected in checks:
        try:
            actual = check()
        except Exception as e:
            print(f"[FAIL] {name} raised: {e}")
            checks_failed += 1
            continue
        if actual == expected:
            print(f"[OK] {name} works")
            checks_passed += 1
        else:
            print(f"[FAIL] {name}: expected {expected!r}, got {actual!r}")
            checks_failed += 1

    # Cross-check against SymPy when it is installed
    try:
        import sympy as sp
    except ImportError:
        print("[WARN] SymPy not available (evaluator cross-check skipped)")
        print("  To install: pip install sympy")
    else:
        samples = [
            ("2+3*4", "2+3*4"),
            ("(2+3)*4", "(2+3)*4"),
            ("2^3^2", "2**3**2"),
            ("100/7", "100/7"),
            ("17%5", "Mod(17, 5)"),
            ("2^-1*8", "2**-1*8"),
        ]
        mismatches = [
            text
            for text, sympy_text in samples
            if evaluate(text).value != int(sp.sympify(sympy_text))
        ]
        if mismatches:
            print(f"[FAIL] SymPy {sp.__version__} disagrees on: {', '.join(mismatches)}")
            checks_failed += 1
        else:
            print(f"[OK] Evaluator agrees with SymPy {sp.__version__}")
            checks_passed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return EXIT_FAILURE

    print("\n[OK] All health checks passed!")
    return EXIT_OK


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the basejump CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 17 for invalid arguments, 13 for an
        unreadable file, 1 for a failed --eval or health check)
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        configuration = build_configuration(args)
    except ConfigurationError:
        print(USAGE, file=sys.stderr)
        return EXIT_INVALID_ARGS

    setup_logging(level=args.log_level, log_file=args.log_file)
    logger.debug("Starting with %s", configuration)

    if args.version:
        print(VERSION)
        return EXIT_OK
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        return _eval_once(args.eval_expr, configuration, args.format)

    if configuration.file_path is not None:
        return run_file(configuration, TerminalDisplay())
    return run_interactive(configuration)


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m basejump_pkg.cli"""
    sys.exit(main_entry())
