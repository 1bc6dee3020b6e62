"""Classification of the input argument into a loadable URI."""

from .resolver import (
    RULES,
    ResolvedSource,
    SourceKind,
    SourceRule,
    base_dir_for,
    classify,
    resolve_source,
)

__all__ = [
    "RULES",
    "ResolvedSource",
    "SourceKind",
    "SourceRule",
    "base_dir_for",
    "classify",
    "resolve_source",
]
