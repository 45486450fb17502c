"""Shared constants used across layers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

MAX_DEPTH: int = 128
"""Default number of guide columns, i.e. the deepest renderable tree."""

MAX_DEPTH_LIMIT: int = 512
"""Upper bound accepted for a caller-supplied ``max_depth``."""

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

GUIDE_BAR: str = "|  "
GUIDE_BLANK: str = "   "
BRANCH: str = "├── "
"""Connector for a child with siblings after it (``├── ``)."""

LAST_BRANCH: str = "└── "
"""Connector for the last child of a node (``└── ``)."""
