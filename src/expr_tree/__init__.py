"""expr-tree — render binary expression trees as indented ASCII diagrams.

The output mimics the ``tree`` command: box-drawing connectors for each
child and vertical guide bars for ancestors that still have siblings
pending.
"""

from expr_tree.core.models import Add, Node, NodeKind, Number, add, number
from expr_tree.core.renderer import format_label, render, render_to_string
from expr_tree.exceptions import DepthExceededError, ExprTreeError
from expr_tree.version import __version__

__all__: list[str] = [
    "Add",
    "DepthExceededError",
    "ExprTreeError",
    "Node",
    "NodeKind",
    "Number",
    "__version__",
    "add",
    "format_label",
    "number",
    "render",
    "render_to_string",
]
