"""A minimal in-memory document tree usable as an element handle."""

from __future__ import annotations

from dataclasses import dataclass, field

from formerrors.constants.dom import (
    DOCUMENT_POSITION_CONTAINED_BY,
    DOCUMENT_POSITION_CONTAINS,
    DOCUMENT_POSITION_DISCONNECTED,
    DOCUMENT_POSITION_FOLLOWING,
    DOCUMENT_POSITION_IMPLEMENTATION_SPECIFIC,
    DOCUMENT_POSITION_PRECEDING,
)


@dataclass(eq=False)
class DocumentElement:
    """An element in tree order, compared by identity.

    Mirrors the DOM ``compareDocumentPosition`` contract so it can stand in
    for a rendered input when no browser document is available.
    """

    tag: str
    parent: DocumentElement | None = field(default=None, repr=False)
    children: list[DocumentElement] = field(default_factory=list, repr=False)

    def append(self, child: DocumentElement) -> DocumentElement:
        """Attach *child* as the last child of this element and return it."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def ancestry(self) -> list[DocumentElement]:
        """Return the chain from the root element down to this element."""
        chain: list[DocumentElement] = []
        node: DocumentElement | None = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    def compare_document_position(self, other: DocumentElement) -> int:
        """Return the position flags of *other* relative to this element."""
        if other is self:
            return 0

        own_chain = self.ancestry()
        other_chain = other.ancestry()
        if own_chain[0] is not other_chain[0]:
            direction = DOCUMENT_POSITION_PRECEDING if id(other) < id(self) else DOCUMENT_POSITION_FOLLOWING
            return DOCUMENT_POSITION_DISCONNECTED | DOCUMENT_POSITION_IMPLEMENTATION_SPECIFIC | direction

        depth = 0
        while (
            depth < len(own_chain)
            and depth < len(other_chain)
            and own_chain[depth] is other_chain[depth]
        ):
            depth += 1

        if depth == len(own_chain):
            return DOCUMENT_POSITION_CONTAINED_BY | DOCUMENT_POSITION_FOLLOWING
        if depth == len(other_chain):
            return DOCUMENT_POSITION_CONTAINS | DOCUMENT_POSITION_PRECEDING

        siblings = own_chain[depth - 1].children
        if siblings.index(other_chain[depth]) < siblings.index(own_chain[depth]):
            return DOCUMENT_POSITION_PRECEDING
        return DOCUMENT_POSITION_FOLLOWING
