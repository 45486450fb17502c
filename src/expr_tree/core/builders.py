"""Ready-made trees and structural measurements.

The measurements walk the tree with an explicit stack instead of
recursion so they also work on trees far deeper than the render limit.
"""

from __future__ import annotations

from expr_tree.core.models import Add, Node, Number


def sample_tree() -> Add:
    """Return the demo tree ``(((1 + 2) + (3 + 4)) + 5)``."""
    return Add(
        Add(
            Add(Number(1), Number(2)),
            Add(Number(3), Number(4)),
        ),
        Number(5),
    )


def left_chain(depth: int, *, start: int = 1) -> Node:
    """Build a left-leaning chain of ``add`` nodes of exactly *depth*.

    Leaves are numbered consecutively from *start*; depth ``0`` yields a
    single leaf.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    node: Node = Number(start)
    for offset in range(1, depth + 1):
        node = Add(node, Number(start + offset))
    return node


def tree_depth(node: Node) -> int:
    """Return the number of edges between *node* and its deepest leaf."""
    deepest = 0
    stack: list[tuple[Node, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in current.children)
    return deepest


def count_nodes(node: Node) -> int:
    """Return the total number of nodes in the tree rooted at *node*."""
    total = 0
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        total += 1
        stack.extend(current.children)
    return total
