"""Pick the single most relevant error out of a nested form error tree."""

from formerrors.extraction import (
    FieldErrorExtractor,
    best_message,
    best_record,
    extract_record,
    first_message,
    merge_records,
)
from formerrors.model import EMPTY_NODE, ElementHandle, ErrorNode, ErrorRecord, Internal, Leaf
from formerrors.orders import (
    CompareResult,
    DomPlaceExtractOrder,
    ExtractOrder,
    MatchedNameExtractOrder,
    MessageExistExtractOrder,
)
from formerrors.tree import DocumentElement, normalize_error_tree

__version__ = "0.1.0"

__all__ = [
    "EMPTY_NODE",
    "CompareResult",
    "DocumentElement",
    "DomPlaceExtractOrder",
    "ElementHandle",
    "ErrorNode",
    "ErrorRecord",
    "ExtractOrder",
    "FieldErrorExtractor",
    "Internal",
    "Leaf",
    "MatchedNameExtractOrder",
    "MessageExistExtractOrder",
    "__version__",
    "best_message",
    "best_record",
    "extract_record",
    "first_message",
    "merge_records",
    "normalize_error_tree",
]
