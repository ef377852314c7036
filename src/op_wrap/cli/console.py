"""CLI console and logging helpers with optional Rich support.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) keep working even when it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from op_wrap.exceptions import EnvironmentError

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance (stderr unless told otherwise)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, errors and progress messages."""

out = _ConsoleProxy(stderr=False)
"""Command results, so they can be piped."""


def configure_logging(level: str) -> None:
    """Attach one handler to the ``op_wrap`` logger at *level*.

    Uses :class:`rich.logging.RichHandler` when Rich is installed.
    Calling this more than once replaces the previous handler.
    """
    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    else:
        handler = RichHandler(console=get_rich_console(), show_path=False)

    root = logging.getLogger("op_wrap")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
