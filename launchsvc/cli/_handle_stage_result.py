"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by main_callback in the context chain.

    Raises:
        RuntimeError: If no context is available or the flag was never set.
        ValueError: If an invalid display format value is encountered.
    """
    if ctx is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)

    Args:
        func: Function that returns StageResult
        ctx: Context of the invoking Typer command, used to find --display

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()

        try:
            display_format = _extract_display_format(ctx)
        except (RuntimeError, ValueError):
            # Default to yaml if context missing or format invalid
            display_format = "yaml"

        _run_single_execution(func, args, kwargs, display, display_format)

    return wrapper  # type: ignore[return-value]
