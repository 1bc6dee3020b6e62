"""Extension based registry for output files.

A plain-text writer is registered for ``.txt``, ``.tsv``, ``.csv`` and
``.dsv``.  The registry dispatches on the file extension and performs no
content conversion: the delimiter is chosen upstream, the writer stores the
text verbatim.

``UnsupportedFormatError`` is raised when writing a file whose extension has
no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .writers.txt_writer import write_text

_WRITERS: dict[str, Callable[..., None]] = {}


def register_writer(ext: str, func: Callable[..., None]) -> None:
    """Register a writer for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".tsv"``).  Matching is
        case-insensitive.
    func:
        Callable taking a path and the text to store.
    """

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def write_file(path: str | os.PathLike[str], text: str, **kwargs: Any) -> None:
    """Write ``text`` to ``path`` using the registered writer for its extension.

    Parameters
    ----------
    path:
        Destination file path.
    text:
        String content to be written.
    **kwargs:
        Additional keyword arguments forwarded to the underlying writer.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, text, **kwargs)


for _ext in (".txt", ".tsv", ".csv", ".dsv"):
    register_writer(_ext, write_text)

__all__ = [
    "register_writer",
    "get_extension",
    "write_file",
]
