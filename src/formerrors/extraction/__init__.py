"""Error tree traversal and ranking."""

from .engine import extract_record, merge_records
from .extractor import FieldErrorExtractor, best_message, best_record
from .first import first_message

__all__ = [
    "FieldErrorExtractor",
    "best_message",
    "best_record",
    "extract_record",
    "first_message",
    "merge_records",
]
