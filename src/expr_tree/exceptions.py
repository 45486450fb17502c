"""Custom exception hierarchy for expr-tree.

Every error raised by the package inherits from :class:`ExprTreeError`
so that the CLI error boundary can render a clean message without
leaking internal stack traces.

Hierarchy
---------
ExprTreeError
├── DepthExceededError
├── InvalidNodeError
└── ConfigurationError
"""

from __future__ import annotations


class ExprTreeError(Exception):
    """Base exception for all expr-tree errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Rendering -------------------------------------------------------------

class DepthExceededError(ExprTreeError):
    """Raised when a tree is deeper than the renderer's guide columns allow.

    Lines written to the sink before the failing subtree remain valid;
    nothing is emitted for the subtree that would overflow.
    """

    def __init__(
        self,
        depth: int,
        max_depth: int,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"Tree depth exceeds the maximum of {max_depth} "
            f"(children requested at depth {depth + 1}).",
            hint=hint,
        )
        self.depth: int = depth
        self.max_depth: int = max_depth


# --- Tree construction -----------------------------------------------------

class InvalidNodeError(ExprTreeError):
    """Raised when a node is built from an invalid value or child."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(ExprTreeError):
    """Raised when a render option is out of its accepted range."""
