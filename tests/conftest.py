"""Shared pytest fixtures for error trees and document elements."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from formerrors.tree import DocumentElement


@pytest.fixture
def build_form() -> Callable[..., dict[str, DocumentElement]]:
    """Return a factory laying out one input per name, in the given order."""

    def _build(*names: str) -> dict[str, DocumentElement]:
        form = DocumentElement("form")
        fieldset = form.append(DocumentElement("fieldset"))
        return {name: fieldset.append(DocumentElement("input")) for name in names}

    return _build
