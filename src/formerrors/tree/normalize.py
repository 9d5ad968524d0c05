"""Normalization of raw error payloads into ``ErrorNode`` trees.

Form layers hand over loosely typed payloads: plain mappings for field
groups, lists for field arrays, and error objects that look like
``{"type": ..., "message": ..., "ref": ...}``. A node can be a field error
and a group at the same time (an array field with its own ``root`` error,
for example). Shape detection happens here once, so the extraction engine
only ever sees ``Leaf`` and ``Internal`` nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from formerrors.constants.nodes import (
    FIELD_ERROR_KEYS,
    GLOBAL_ERROR_KEYS,
    MESSAGE_KEY,
    REF_KEY,
    TYPE_KEY,
    TYPES_KEY,
)
from formerrors.constants.paths import ROOT_PATH
from formerrors.model import EMPTY_NODE, ElementHandle, ErrorNode, Internal, Leaf
from formerrors.utils.paths import join_path

logger = logging.getLogger(__name__)


def normalize_error_tree(raw: Any, path: str = ROOT_PATH) -> ErrorNode:
    """Convert *raw* into an ``ErrorNode``; malformed input becomes ``EMPTY_NODE``."""
    if isinstance(raw, Leaf):
        return raw
    if isinstance(raw, Internal):
        return _normalize_internal(raw, path)
    if isinstance(raw, Mapping):
        return _normalize_mapping(raw, path)
    if _is_container(raw):
        return _normalize_sequence(raw, path)
    return EMPTY_NODE


def is_element(value: object) -> bool:
    """Return whether *value* can serve as an element handle."""
    return isinstance(value, ElementHandle)


def _is_container(value: object) -> bool:
    if isinstance(value, (Mapping, Leaf, Internal)):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _normalize_mapping(raw: Mapping[Any, Any], path: str) -> ErrorNode:
    if _is_global_error(raw):
        return Leaf(message=raw.get(MESSAGE_KEY), type=_type_code(raw.get(TYPE_KEY)))
    if _is_field_error(raw):
        return Leaf(message=raw.get(MESSAGE_KEY), element=raw.get(REF_KEY), type=raw[TYPE_KEY])

    message = raw.get(MESSAGE_KEY)
    if message is not None and not isinstance(message, str):
        logger.debug("Ambiguous error node at %r: non-string message, treating as group", path)
        message = None
    ref = raw.get(REF_KEY)
    element = ref if is_element(ref) else None
    own = None
    if message is not None or element is not None:
        own = Leaf(message=message, element=element, type=_type_code(raw.get(TYPE_KEY)))

    children: dict[str, ErrorNode] = {}
    for key, value in raw.items():
        if not _is_container(value):
            continue
        segment = str(key)
        if segment in children:
            logger.debug("Duplicate segment %r at %r: keeping the first entry", segment, path)
            continue
        children[segment] = normalize_error_tree(value, join_path(path, segment))
    return Internal(children=children, own=own)


def _normalize_internal(node: Internal, path: str) -> Internal:
    """Normalize raw children of a prebuilt group; unchanged groups are returned as-is."""
    children: dict[str, ErrorNode] = {}
    changed = False
    for segment, child in node.children.items():
        normalized = normalize_error_tree(child, join_path(path, segment)) if _is_container(child) else EMPTY_NODE
        changed = changed or normalized is not child
        children[segment] = normalized
    if not changed:
        return node
    return Internal(children=children, own=node.own)


def _normalize_sequence(raw: Sequence[Any], path: str) -> ErrorNode:
    children: dict[str, ErrorNode] = {}
    for index, value in enumerate(raw):
        if not _is_container(value):
            continue
        segment = str(index)
        children[segment] = normalize_error_tree(value, join_path(path, segment))
    return Internal(children=children)


def _type_code(value: object) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int)):
        return str(value)
    return None


def _is_global_error(raw: Mapping[Any, Any]) -> bool:
    """Return whether *raw* only carries an optional type code and message."""
    if not set(raw).issubset(GLOBAL_ERROR_KEYS):
        return False
    type_code = raw.get(TYPE_KEY)
    if type_code is not None and (isinstance(type_code, bool) or not isinstance(type_code, (str, int))):
        return False
    message = raw.get(MESSAGE_KEY)
    return message is None or isinstance(message, str)


def _is_field_error(raw: Mapping[Any, Any]) -> bool:
    """Return whether *raw* is a field error bound to an input element."""
    if not isinstance(raw.get(TYPE_KEY), str) or not set(raw).issubset(FIELD_ERROR_KEYS):
        return False
    message = raw.get(MESSAGE_KEY)
    if message is not None and not isinstance(message, str):
        return False
    ref = raw.get(REF_KEY)
    if ref is not None and not is_element(ref):
        return False
    types = raw.get(TYPES_KEY)
    return types is None or _is_multiple_field_errors(types)


def _is_multiple_field_errors(value: object) -> bool:
    """Return whether *value* maps rule names to messages (criteria mode "all")."""
    if not isinstance(value, Mapping):
        return False
    for result in value.values():
        if isinstance(result, (list, tuple)):
            if not all(isinstance(message, str) for message in result):
                return False
        elif result is not None and not isinstance(result, (str, bool)):
            return False
    return True
