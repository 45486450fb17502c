"""Allow ``python -m expr_tree`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m expr_tree`` behaves identically to the ``expr-tree``
console script.
"""

from __future__ import annotations

from expr_tree.cli.app import cli

if __name__ == "__main__":
    cli()
