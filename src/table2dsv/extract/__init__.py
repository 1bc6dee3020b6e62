"""Row text assembly and cleanup."""

from .cleanup import apply_delimiter, clean_rows, join_rows, strip_soft_breaks
from .extractor import ExtractionResult, extract_table_text

__all__ = [
    "ExtractionResult",
    "apply_delimiter",
    "clean_rows",
    "extract_table_text",
    "join_rows",
    "strip_soft_breaks",
]
