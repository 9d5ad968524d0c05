"""Field path constants."""

from __future__ import annotations

PATH_SEPARATOR: str = "."
ROOT_PATH: str = ""
