"""Error tree nodes and the candidate record extracted from them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias, runtime_checkable

from formerrors.constants.paths import ROOT_PATH


@runtime_checkable
class ElementHandle(Protocol):
    """Opaque UI element attached to a field error.

    ``compare_document_position`` returns the ``DOCUMENT_POSITION_*`` flags
    describing where *other* sits relative to this element.
    """

    def compare_document_position(self, other: ElementHandle) -> int: ...


@dataclass(frozen=True)
class Leaf:
    """A node carrying an actual error."""

    message: str | None = None
    element: ElementHandle | None = None
    type: str | None = None


@dataclass(frozen=True)
class Internal:
    """A container of named child nodes, optionally carrying its own error."""

    children: Mapping[str, ErrorNode] = field(default_factory=dict)
    own: Leaf | None = None


ErrorNode: TypeAlias = Leaf | Internal

EMPTY_NODE: Internal = Internal()


@dataclass(frozen=True)
class ErrorRecord:
    """One candidate error located at a field path."""

    path: str = ROOT_PATH
    message: str | None = None
    element: ElementHandle | None = None
    type: str | None = None

    @classmethod
    def empty(cls, path: str = ROOT_PATH) -> ErrorRecord:
        """Return a record that carries no error."""
        return cls(path=path)

    @classmethod
    def from_node(cls, path: str, node: object) -> ErrorRecord:
        """Build a record from a leaf; anything else yields an empty record."""
        if isinstance(node, Leaf):
            return cls(path=path, message=node.message, element=node.element, type=node.type)
        return cls.empty(path)

    def is_empty(self) -> bool:
        """Whether neither a message nor an element is present."""
        return self.message is None and self.element is None
