"""basejump package: numeral converter, expression transcoder, evaluator, session and CLI."""

__all__ = [
    "config",
    "converter",
    "transcoder",
    "evaluator",
    "history",
    "session",
    "display",
    "terminal",
    "options",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "evaluate_in_base",
    "convert",
    "validate_expression",
    "results_by_base",
]
