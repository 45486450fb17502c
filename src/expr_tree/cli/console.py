"""Stderr console helpers with optional Rich support.

Rich is imported lazily so ``--help`` and ``--version`` keep working
when it is not installed.  The diagram itself never goes through this
console: it is written verbatim to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from expr_tree.exceptions import ConfigurationError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``ConfigurationError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise ConfigurationError(
            "rich is not installed.",
            hint="Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain stderr fallback."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except ConfigurationError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def build_log_handler() -> logging.Handler:
    """Return a ``RichHandler`` on stderr, or a plain stream handler."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler
    return RichHandler(console=get_rich_console(), show_path=False)
