"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from rich.markup import escape

from qcat.api.validate_output import validate_output
from qcat.constants import DEFAULT_TIMESTAMP_FORMAT

from .display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(func: F, args: tuple, kwargs: dict, display: Display, display_format: str) -> None:
    """Run command once, display each stage, and exit with its status.

    Commands must handle expected exceptions internally and report errors
    via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for _progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)
        display.info(f"[dim]{timestamp}[/dim] {escape(message)}")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    result.output = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)
    for warning in result.output.get("warnings", []):
        display.warning(warning)

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
