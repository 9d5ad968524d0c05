"""Document position bit flags, matching ``Node.compareDocumentPosition``."""

from __future__ import annotations

DOCUMENT_POSITION_DISCONNECTED: int = 0x01
DOCUMENT_POSITION_PRECEDING: int = 0x02
DOCUMENT_POSITION_FOLLOWING: int = 0x04
DOCUMENT_POSITION_CONTAINS: int = 0x08
DOCUMENT_POSITION_CONTAINED_BY: int = 0x10
DOCUMENT_POSITION_IMPLEMENTATION_SPECIFIC: int = 0x20
