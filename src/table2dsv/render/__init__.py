"""Rendering engine adapters.

The rest of the package only depends on the :class:`Renderer` protocol.
Playwright is imported on first use so that resolving and cleaning stay
importable without browser binaries.
"""

from __future__ import annotations

from table2dsv.config.schema import RenderSettings

from .base import Renderer
from .playwright_renderer import PlaywrightRenderer


def create_renderer(settings: RenderSettings) -> Renderer:
    """Return the renderer used by the command line interface."""

    return PlaywrightRenderer(settings)


__all__ = ["Renderer", "PlaywrightRenderer", "create_renderer"]
