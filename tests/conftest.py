"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from athena.classification.rules import ClassificationEngine
from athena.diagnostic.models import DiagnosticInput
from athena.export.renderer import DiagnosticRenderer


def _form(**overrides: Any) -> dict[str, Any]:
    form: dict[str, Any] = {
        "institutionName": "Northfield University",
        "institutionType": "academic",
        "statedBoundaries": "The review board evaluates research ethics only.",
        "observedBehaviors": "The board consistently adheres to its published remit.",
    }
    form.update(overrides)
    return form


@pytest.fixture()
def engine() -> ClassificationEngine:
    """A ClassificationEngine using the packaged catalog."""
    return ClassificationEngine()


@pytest.fixture()
def renderer() -> DiagnosticRenderer:
    return DiagnosticRenderer()


@pytest.fixture()
def make_form() -> Callable[..., dict[str, Any]]:
    """Build a complete form payload; keyword overrides replace fields."""
    return _form


@pytest.fixture()
def make_input() -> Callable[..., DiagnosticInput]:
    """Build a DiagnosticInput from the default form plus overrides."""

    def factory(**overrides: Any) -> DiagnosticInput:
        return DiagnosticInput.from_form(_form(**overrides))

    return factory
