"""Helpers for dot-joined field paths."""

from __future__ import annotations

from formerrors.constants.paths import PATH_SEPARATOR, ROOT_PATH


def join_path(parent: str, segment: str) -> str:
    """Append *segment* to *parent*, omitting the separator at the root."""
    if parent == ROOT_PATH:
        return segment
    return f"{parent}{PATH_SEPARATOR}{segment}"


def path_has_prefix(path: str, prefix: str) -> bool:
    """Return whether *prefix* names *path* itself or one of its ancestors."""
    if path == prefix:
        return True
    if prefix == ROOT_PATH:
        return False
    return path.startswith(f"{prefix}{PATH_SEPARATOR}")
