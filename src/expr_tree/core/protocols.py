"""Protocols consumed by the renderer.

The renderer depends only on this structural contract, so any text
stream (``sys.stdout``, an open file, :class:`io.StringIO`) can receive
the diagram without explicit inheritance.
"""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Write-only text stream.

    Buffering, flushing and closing are the sink owner's concern; the
    renderer only ever calls :meth:`write`.
    """

    def write(self, text: str, /) -> object:
        """Append *text* to the stream."""
        ...  # pragma: no cover
