"""Renderer protocol.

A renderer loads a URI in a browser-like engine and returns the rendered text
of every table row, in document order.  Entity decoding and whitespace
collapsing are the engine's responsibility.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    """Protocol for table row renderers."""

    def render(self, uri: str) -> list[str]:
        """Load ``uri`` and return the visible text of each table row.

        An empty list is returned when the page has no matching rows.
        """

        ...
