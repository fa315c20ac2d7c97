"""CLI console helpers with optional Rich support.

Two consoles are exposed: :data:`console` writes command results to
stdout, :data:`err_console` writes status lines, warnings and errors to
stderr.  Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) and plain output keep working when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from tuido.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance targeting stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-text fallback."""

    def __init__(self, *, stderr: bool = False) -> None:
        self._stderr: bool = stderr

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain ``print``.

        Pass ``markup=False`` for text that must appear verbatim, such
        as user input or file paths.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            if markup:
                objects = tuple(_MARKUP_TAG.sub("", str(obj)) for obj in objects)
            print(*objects, file=stream)
            return
        rich_console.print(*objects, markup=markup, emoji=markup, highlight=False)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
