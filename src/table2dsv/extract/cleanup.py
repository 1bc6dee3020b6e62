"""Cleanup of rendered row text.

Quoted-printable sources such as MHTML archives wrap long lines with a
trailing ``=``.  Once the browser collapses the following line break into
whitespace, a value like ``1-=\n2`` renders as ``1-= 2``.  :func:`strip_soft_breaks`
removes every ``=`` directly followed by a space or a tab so the value reads
``1-2`` again.

Removal is repeated until no pair is left.  A single pass is not idempotent:
``"==  "`` becomes ``"= "`` which would match again.

>>> strip_soft_breaks("1-1\\t1-= 2")
'1-1\\t1-2'
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SOFT_BREAK_RE = re.compile(r"=[\t ]")

# Cell separator produced by ``innerText`` for table rows.
CELL_SEPARATOR = "\t"


def join_rows(rows: Iterable[str]) -> str:
    """Join row texts with newlines, first row first."""

    return "\n".join(rows)


def strip_soft_breaks(text: str) -> str:
    """Remove ``"= "`` and ``"=\\t"`` sequences until none remain."""

    count = 1
    while count:
        text, count = _SOFT_BREAK_RE.subn("", text)
    return text


def clean_rows(rows: Iterable[str]) -> str:
    """Return ``rows`` joined by newlines with soft breaks removed."""

    return strip_soft_breaks(join_rows(rows))


def apply_delimiter(text: str, delimiter: str | None) -> str:
    """Replace the tab cell separator with ``delimiter``.

    ``None`` leaves ``text`` unchanged.
    """

    if delimiter is None or delimiter == CELL_SEPARATOR:
        return text
    return text.replace(CELL_SEPARATOR, delimiter)


__all__ = ["CELL_SEPARATOR", "join_rows", "strip_soft_breaks", "clean_rows", "apply_delimiter"]
