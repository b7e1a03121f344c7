"""Diagnostic workflow: classify a submission and render the report fragment."""

from __future__ import annotations

import logging

from athena.classification.rules import ClassificationEngine, has_discrepancies
from athena.diagnostic.models import DiagnosticInput
from athena.export.renderer import DiagnosticRenderer

logger = logging.getLogger(__name__)


class DiagnosticService:
    """Runs one diagnostic submission through classification and rendering.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        engine: ClassificationEngine | None = None,
        renderer: DiagnosticRenderer | None = None,
    ) -> None:
        self._engine = engine or ClassificationEngine()
        self._renderer = renderer or DiagnosticRenderer()

    def run(self, data: DiagnosticInput) -> str:
        """Classify the submission and return the HTML fragment."""
        result = self._engine.classify(data.stated_boundaries, data.observed_behaviors)

        logger.info(
            "Diagnostic classified as Class %s (%d sub-classifications)",
            result.primary.value,
            len(result.sub_classifications),
        )
        if has_discrepancies(data.stated_boundaries, data.observed_behaviors):
            logger.debug("Observed behaviors contain discrepancy markers")

        return self._renderer.render(data, result)

    @property
    def engine(self) -> ClassificationEngine:
        return self._engine
