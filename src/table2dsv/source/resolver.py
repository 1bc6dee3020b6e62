"""Input source classification.

A single command line argument is mapped to one of three source kinds by an
ordered rule list.  The first rule whose predicate matches wins:

1. ``URL`` - the argument starts with ``http://`` or ``https://`` and is
   passed to the browser unchanged.
2. ``FILE`` - the argument ends in ``.htm``, ``.html`` or ``.mhtml``
   (case-insensitive).  It is joined onto a base directory and turned into a
   ``file://`` URI.  Absolute paths are kept as they are.
3. ``INLINE`` - the lowercased argument contains ``<table>`` followed somewhere
   later by ``</table>``.  The argument is percent-encoded into a
   ``data:text/html,`` URI.

Order matters: a URL such as ``https://host/page.html`` also satisfies the
file predicate, and an inline fragment may mention a file name.

Example
-------

>>> resolve_source("https://example.org/t.html").uri
'https://example.org/t.html'
>>> resolve_source("<table><tr><td>1</td></tr></table>").kind
<SourceKind.INLINE: 'inline'>
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable
from urllib.parse import quote

from table2dsv.config.schema import SourceSettings
from table2dsv.utils.errors import MissingArgumentError, UnrecognizedInputError

DATA_URI_PREFIX = "data:text/html,"

_URL_RE = re.compile(r"^https?://")
_HTML_FILE_RE = re.compile(r"\.(?:html?|mhtml)\Z", re.IGNORECASE)
_TABLE_RE = re.compile(r"<table>.*</table>", re.DOTALL)

# Package directory, used when ``source.file_base`` is ``"package"``.
_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class SourceKind(Enum):
    """Kinds of input sources."""

    URL = "url"
    FILE = "file"
    INLINE = "inline"


@dataclass(slots=True, frozen=True)
class ResolvedSource:
    """An input argument resolved to a URI the browser can load.

    ``path`` is the absolute filesystem path for ``FILE`` sources and ``None``
    otherwise.
    """

    kind: SourceKind
    uri: str
    argument: str
    path: Path | None = None


@dataclass(slots=True, frozen=True)
class SourceRule:
    """One entry of the classification table."""

    kind: SourceKind
    matches: Callable[[str], bool]
    build: Callable[[str, Path], ResolvedSource]


def _is_url(argument: str) -> bool:
    return _URL_RE.match(argument) is not None


def _is_html_file(argument: str) -> bool:
    return _HTML_FILE_RE.search(argument) is not None


def _is_table_fragment(argument: str) -> bool:
    return _TABLE_RE.search(argument.lower()) is not None


def _build_url(argument: str, _base_dir: Path) -> ResolvedSource:
    return ResolvedSource(SourceKind.URL, argument, argument)


def _build_file(argument: str, base_dir: Path) -> ResolvedSource:
    path = Path(os.path.abspath(os.path.join(base_dir, argument)))
    return ResolvedSource(SourceKind.FILE, path.as_uri(), argument, path)


def _build_inline(argument: str, _base_dir: Path) -> ResolvedSource:
    # Raw newlines and "#" would be stripped or treated as a fragment by the
    # browser's URL parser, so the payload is fully percent-encoded.  No
    # charset is declared: non-ASCII text is decoded with the engine default.
    return ResolvedSource(SourceKind.INLINE, DATA_URI_PREFIX + quote(argument, safe=""), argument)


RULES: tuple[SourceRule, ...] = (
    SourceRule(SourceKind.URL, _is_url, _build_url),
    SourceRule(SourceKind.FILE, _is_html_file, _build_file),
    SourceRule(SourceKind.INLINE, _is_table_fragment, _build_inline),
)


def _match(argument: str | None) -> SourceRule:
    if not argument:
        raise MissingArgumentError(
            "missing argument: give an http(s) URL, a .htm/.html/.mhtml file "
            "or an inline <table>...</table> fragment"
        )
    for rule in RULES:
        if rule.matches(argument):
            return rule
    raise UnrecognizedInputError(
        "unrecognized input type: expected an http(s) URL, a .htm/.html/.mhtml "
        "file or an inline <table>...</table> fragment"
    )


def classify(argument: str | None) -> SourceKind:
    """Return the :class:`SourceKind` of ``argument``.

    Raises
    ------
    MissingArgumentError
        If ``argument`` is ``None`` or empty.
    UnrecognizedInputError
        If no rule matches.
    """

    return _match(argument).kind


def resolve_source(argument: str | None, base_dir: str | os.PathLike[str] | None = None) -> ResolvedSource:
    """Classify ``argument`` and build its URI.

    Parameters
    ----------
    argument:
        The raw command line argument.
    base_dir:
        Directory relative file paths are joined onto.  Defaults to the
        current working directory.
    """

    rule = _match(argument)
    assert argument is not None
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    return rule.build(argument, base)


def base_dir_for(settings: SourceSettings) -> Path:
    """Return the directory local file arguments are resolved against.

    An explicit ``base_dir`` (from YAML, the environment or the command line)
    wins.  Otherwise ``file_base`` selects the caller's working directory or
    the installed package directory.
    """

    if settings.base_dir is not None:
        return settings.base_dir
    if settings.file_base == "package":
        return _PACKAGE_DIR
    return Path.cwd()


__all__ = [
    "DATA_URI_PREFIX",
    "SourceKind",
    "ResolvedSource",
    "SourceRule",
    "RULES",
    "classify",
    "resolve_source",
    "base_dir_for",
]
