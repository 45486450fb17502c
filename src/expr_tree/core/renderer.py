"""ASCII rendering for expression trees.

The walk is depth-first and pre-order: a node's label line is written
before any of its descendants.  Every non-root line has the shape::

    <guide columns><connector><label>

where each guide column is ``"|  "`` or three spaces and the connector is
``"├── "`` or ``"└── "`` for the last child.  Lines are written to the
sink as soon as they are produced, so a failure part-way leaves every
already written line intact.
"""

from __future__ import annotations

import io
import logging

from expr_tree.core.guides import GuideColumns
from expr_tree.core.models import Node, Number
from expr_tree.core.protocols import TextSink
from expr_tree.exceptions import ConfigurationError, DepthExceededError
from expr_tree.utils import BRANCH, LAST_BRANCH, MAX_DEPTH, MAX_DEPTH_LIMIT

logger = logging.getLogger(__name__)


def format_label(node: Node) -> str:
    """Return ``number(<value>)`` for a leaf and ``add`` otherwise."""
    if isinstance(node, Number):
        return f"number({node.value})"
    return "add"


def render(root: Node, sink: TextSink, *, max_depth: int = MAX_DEPTH) -> None:
    """Write the diagram of *root* to *sink*, one line per node.

    Parameters
    ----------
    root:
        Tree to draw.  It is only read, never modified.
    sink:
        Any object with a ``write(str)`` method.  It is neither flushed
        nor closed.
    max_depth:
        Number of guide columns available.  A tree whose depth equals
        *max_depth* still renders; one level deeper fails.

    Raises
    ------
    DepthExceededError
        When the tree is deeper than *max_depth*.  Nothing is written for
        the offending subtree.
    ConfigurationError
        When *max_depth* is not an integer in ``[0, MAX_DEPTH_LIMIT]``.
    """
    _validate_max_depth(max_depth)
    logger.debug(
        "Rendering expression tree",
        extra={"root_kind": root.kind.value, "max_depth": max_depth},
    )

    guides = GuideColumns(max_depth)
    sink.write(format_label(root) + "\n")
    try:
        _render_children(root, sink, guides, 0)
    except DepthExceededError as exc:
        logger.warning(
            "Render aborted: %s",
            exc,
            extra={"depth": exc.depth, "max_depth": exc.max_depth},
        )
        raise


def render_to_string(root: Node, *, max_depth: int = MAX_DEPTH) -> str:
    """Render *root* into memory and return the text."""
    buffer = io.StringIO()
    render(root, buffer, max_depth=max_depth)
    return buffer.getvalue()


def _render_children(
    node: Node, sink: TextSink, guides: GuideColumns, depth: int
) -> None:
    """Write every child of *node* (which sits at *depth*) and recurse."""
    children = node.children
    if not children:
        return
    if depth >= guides.max_depth:
        raise DepthExceededError(
            depth,
            guides.max_depth,
            hint=(
                f"Render with a larger max_depth (at most {MAX_DEPTH_LIMIT}) "
                "or flatten the tree."
            ),
        )

    last_index = len(children) - 1
    for index, child in enumerate(children):
        is_last = index == last_index
        connector = LAST_BRANCH if is_last else BRANCH
        sink.write(f"{guides.prefix(depth)}{connector}{format_label(child)}\n")
        # Column `depth` shows a bar under this child only if siblings follow.
        with guides.continuing(depth, not is_last):
            _render_children(child, sink, guides, depth + 1)


def _validate_max_depth(max_depth: int) -> None:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise ConfigurationError(
            f"max_depth must be an int, got {type(max_depth).__name__}.",
        )
    if not 0 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ConfigurationError(
            f"max_depth {max_depth} is outside the supported range.",
            hint=f"Choose a value between 0 and {MAX_DEPTH_LIMIT}.",
        )
