"""Configuration-related exceptions."""

from __future__ import annotations

from formerrors.exceptions.base import FormErrorsError


class ConfigError(FormErrorsError, ValueError):
    """Raised when an extract order configuration is invalid."""
