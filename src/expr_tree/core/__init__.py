"""Core layer — tree model and rendering.

Rules
-----
* No ``print()`` calls.
* Output only through the caller-supplied sink.
* No imports from ``cli``.
"""

from expr_tree.core.builders import count_nodes, left_chain, sample_tree, tree_depth
from expr_tree.core.guides import GuideColumns
from expr_tree.core.models import Add, Node, NodeKind, Number, add, number
from expr_tree.core.protocols import TextSink
from expr_tree.core.renderer import format_label, render, render_to_string

__all__: list[str] = [
    "Add",
    "GuideColumns",
    "Node",
    "NodeKind",
    "Number",
    "TextSink",
    "add",
    "count_nodes",
    "format_label",
    "left_chain",
    "number",
    "render",
    "render_to_string",
    "sample_tree",
    "tree_depth",
]
