"""Plain-text writer for converted tables.

:func:`write_text` stores the converted rows followed by a single trailing
newline, matching what is printed on standard output.  Directories required to
store the file are created automatically.
"""

from __future__ import annotations

import os
from pathlib import Path

PathLikeStr = os.PathLike[str]


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """Write ``text`` and a terminating newline to ``path``.

    Parameters
    ----------
    path:
        Destination file path.
    text:
        Converted table text; rows separated by ``"\\n"``.
    encoding:
        Output encoding.  Defaults to UTF-8 without a byte-order mark.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline="") as f:
        f.write(text)
        f.write("\n")


__all__ = ["write_text"]
