"""Domain models for expr-tree.

A tree is built bottom-up from two node variants, both **frozen**
dataclasses: a parent can only be created from children that already
exist, and nothing can be reattached afterwards, so every tree is finite
and acyclic by construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from expr_tree.exceptions import InvalidNodeError
from expr_tree.utils import INT32_MAX, INT32_MIN


class NodeKind(str, Enum):
    """Variant tag carried by every node."""

    NUMBER = "number"
    ADD = "add"


# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Number:
    """A leaf holding a signed 32-bit integer."""

    kind: ClassVar[NodeKind] = NodeKind.NUMBER

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidNodeError(
                f"Number value must be an int, got {type(self.value).__name__}.",
            )
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise InvalidNodeError(
                f"Number value {self.value} is outside the signed 32-bit range.",
                hint=f"Use a value between {INT32_MIN} and {INT32_MAX}.",
            )

    @property
    def children(self) -> tuple[()]:
        return ()


# ---------------------------------------------------------------------------
# Binary addition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Add:
    """An internal node owning exactly two children, left before right."""

    kind: ClassVar[NodeKind] = NodeKind.ADD

    left: Node
    right: Node

    def __post_init__(self) -> None:
        for side in ("left", "right"):
            child = getattr(self, side)
            if not isinstance(child, (Number, Add)):
                raise InvalidNodeError(
                    f"Add.{side} must be a Number or Add node, "
                    f"got {type(child).__name__}.",
                )

    @property
    def children(self) -> tuple[Node, Node]:
        return (self.left, self.right)


Node = Number | Add


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

def number(value: int) -> Number:
    """Build a leaf node."""
    return Number(value)


def add(left: Node, right: Node) -> Add:
    """Build an ``add`` node from two existing children."""
    return Add(left, right)
