"""Public entry points for picking the error to report."""

from __future__ import annotations

from collections.abc import Sequence

from formerrors.extraction.engine import extract_record
from formerrors.model import ErrorNode, ErrorRecord
from formerrors.orders.base import ExtractOrder
from formerrors.tree.normalize import normalize_error_tree
from formerrors.types import RawErrorTree


class FieldErrorExtractor:
    """Bind an error tree and rank its errors on demand."""

    def __init__(self, field_errors: RawErrorTree | ErrorNode) -> None:
        self._tree: ErrorNode = normalize_error_tree(field_errors)

    @property
    def tree(self) -> ErrorNode:
        """Normalized error tree."""
        return self._tree

    def extract(self, orders: Sequence[ExtractOrder] = ()) -> ErrorRecord:
        """Return the winning record, which is empty when no error exists."""
        return extract_record(self._tree, orders)

    def best_record(self, orders: Sequence[ExtractOrder] = ()) -> ErrorRecord | None:
        """Return the winning record, or ``None`` when the tree holds no error."""
        record = self.extract(orders)
        if record.is_empty():
            return None
        return record

    def best_message(self, orders: Sequence[ExtractOrder] = ()) -> str | None:
        """Return the winning record's message, if any."""
        record = self.best_record(orders)
        return record.message if record is not None else None


def best_record(field_errors: RawErrorTree | ErrorNode, orders: Sequence[ExtractOrder] = ()) -> ErrorRecord | None:
    """Return the highest-priority record in *field_errors*, or ``None``."""
    return FieldErrorExtractor(field_errors).best_record(orders)


def best_message(field_errors: RawErrorTree | ErrorNode, orders: Sequence[ExtractOrder] = ()) -> str | None:
    """Return the message of the highest-priority record in *field_errors*."""
    return FieldErrorExtractor(field_errors).best_message(orders)
