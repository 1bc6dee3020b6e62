"""Table text extraction driven by a :class:`~table2dsv.render.base.Renderer`."""

from __future__ import annotations

from dataclasses import dataclass

from table2dsv.render.base import Renderer
from table2dsv.utils.logging import get_logger

from .cleanup import apply_delimiter, clean_rows

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Result of :func:`extract_table_text`.

    Attributes
    ----------
    uri:
        The address that was rendered.
    rows:
        Raw row texts as returned by the renderer, in document order.
    text:
        Cleaned output ready to be printed or written.
    """

    uri: str
    rows: tuple[str, ...]
    text: str


def extract_table_text(
    uri: str,
    renderer: Renderer,
    *,
    delimiter: str | None = None,
) -> ExtractionResult:
    """Render ``uri`` and return its cleaned table text.

    Renderer failures propagate unchanged.
    """

    rows = tuple(renderer.render(uri))
    if not rows:
        logger.warning("No table rows found at %s", uri)
    text = apply_delimiter(clean_rows(rows), delimiter)
    return ExtractionResult(uri=uri, rows=rows, text=text)


__all__ = ["ExtractionResult", "extract_table_text"]
