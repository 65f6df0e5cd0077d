"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel

from ._print_text_report import _print_text_report
from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _handle_stage_result(func: F, output_schema: type[BaseModel], display_format: str = "text") -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as text, JSON or YAML)

    Args:
        func: Function that returns StageResult
        output_schema: Pydantic model the output dict must satisfy
        display_format: One of text, json, yaml

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """
    if display_format not in DISPLAY_FORMATS:
        raise ValueError(f"Invalid display format: {display_format!r}")

    result_printer = _print_text_report if display_format == "text" else None

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        _run_single_execution(func, args, kwargs, display, output_schema, display_format, result_printer)

    return wrapper  # type: ignore[return-value]
