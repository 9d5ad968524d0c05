"""Root of the formerrors exception hierarchy."""

from __future__ import annotations


class FormErrorsError(Exception):
    """Base class for all errors raised by formerrors."""
