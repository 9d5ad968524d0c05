"""Error tree normalization and document helpers."""

from .document import DocumentElement
from .normalize import is_element, normalize_error_tree

__all__ = ["DocumentElement", "is_element", "normalize_error_tree"]
