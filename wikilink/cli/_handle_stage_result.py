"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import click

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format from the active Typer/Click context.

    Raises:
        RuntimeError: If no context is available or the flag was never set.
        ValueError: If an invalid display format value is encountered.
    """
    context: click.Context | None = click.get_current_context(silent=True)
    if context is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    current: click.Context | None = context
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout as YAML or JSON)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            display_format = _extract_display_format()
        except (RuntimeError, ValueError):
            display_format = "yaml"

        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
