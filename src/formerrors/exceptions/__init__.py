"""Shared exception hierarchy for formerrors."""

from __future__ import annotations

from .base import FormErrorsError
from .config import ConfigError

__all__ = ["ConfigError", "FormErrorsError"]
