"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel
from rich.markup import escape

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    output_schema: type[BaseModel],
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once, display each stage and exit with its status."""
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress - generator yields (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {escape(message)} ({progress_percent:.1%})")

    # Ensure required fields are set after callback completes
    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    result.output = output_schema.model_validate(result.output).model_dump(mode="python")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result_printer:
        result_printer(result.output)
    else:
        display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
