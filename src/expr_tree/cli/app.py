"""CLI application entry point for expr-tree.

This module is the **sole error boundary** for the application.  It
catches :class:`~expr_tree.exceptions.ExprTreeError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, reports them on stderr, and returns
well-defined exit codes.

The diagram is written to stdout exactly as the renderer produces it;
everything else (logs, errors, hints) goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys

from expr_tree.cli import exit_codes
from expr_tree.cli.console import build_log_handler, console
from expr_tree.core.builders import count_nodes, left_chain, sample_tree, tree_depth
from expr_tree.core.models import Node
from expr_tree.core.renderer import render
from expr_tree.exceptions import ExprTreeError
from expr_tree.utils import MAX_DEPTH
from expr_tree.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``expr-tree``              — draw the sample tree ``(((1+2)+(3+4))+5)``
    * ``expr-tree --chain N``    — draw a left-leaning chain of depth N
    * ``expr-tree --version``
    """
    parser = argparse.ArgumentParser(
        prog="expr-tree",
        description="Render a binary expression tree as an ASCII diagram.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--chain",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Render a left-leaning chain of add nodes of depth N "
        "instead of the sample tree.",
    )
    parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=MAX_DEPTH,
        metavar="N",
        help=f"Deepest tree the renderer accepts (default: {MAX_DEPTH}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    """Attach a single stderr handler to the package logger."""
    package_logger = logging.getLogger("expr_tree")
    package_logger.handlers.clear()
    package_logger.addHandler(build_log_handler())
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _select_tree(chain: int | None) -> Node:
    if chain is None:
        return sample_tree()
    return left_chain(chain)


def _handle_render(tree: Node, max_depth: int) -> int:
    """Render *tree* to stdout."""
    logger.debug(
        "Selected tree",
        extra={"nodes": count_nodes(tree), "depth": tree_depth(tree)},
    )
    render(tree, sys.stdout, max_depth=max_depth)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the expr-tree CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    tree = _select_tree(args.chain)
    return _handle_render(tree, args.max_depth)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ExprTreeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
