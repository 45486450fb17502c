"""Per-depth guide columns used while walking a tree.

``columns[d]`` is ``True`` while an ancestor at depth ``d`` still has
siblings waiting to be printed; every line drawn beneath it then shows a
vertical bar in column ``d``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from expr_tree.exceptions import DepthExceededError
from expr_tree.utils import GUIDE_BAR, GUIDE_BLANK


class GuideColumns:
    """Fixed-size guide state owned by a single render call."""

    __slots__ = ("_columns",)

    def __init__(self, max_depth: int) -> None:
        self._columns: list[bool] = [False] * max_depth

    @property
    def max_depth(self) -> int:
        return len(self._columns)

    def __getitem__(self, depth: int) -> bool:
        self._check(depth)
        return self._columns[depth]

    def prefix(self, depth: int) -> str:
        """Return the indentation drawn for columns ``0`` to ``depth - 1``."""
        if depth > self.max_depth:
            raise DepthExceededError(depth, self.max_depth)
        return "".join(
            GUIDE_BAR if active else GUIDE_BLANK
            for active in self._columns[:depth]
        )

    @contextmanager
    def continuing(self, depth: int, active: bool) -> Iterator[None]:
        """Set column *depth* to *active* for the duration of the block.

        The previous value is restored on exit, also when the block
        raises.
        """
        self._check(depth)
        previous = self._columns[depth]
        self._columns[depth] = active
        try:
            yield
        finally:
            self._columns[depth] = previous

    def _check(self, depth: int) -> None:
        if depth < 0:
            raise IndexError(f"guide column {depth} is negative")
        if depth >= self.max_depth:
            raise DepthExceededError(depth, self.max_depth)
