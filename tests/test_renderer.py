"""Tests for the diagnostic HTML fragment renderer."""

from __future__ import annotations

from athena.classification.rules import ClassificationEngine
from athena.core.types import format_institution_type
from athena.export.renderer import DiagnosticRenderer


def _render(engine, renderer, data) -> str:
    result = engine.classify(data.stated_boundaries, data.observed_behaviors)
    return renderer.render(data, result)


class TestEscaping:
    def test_institution_name_is_escaped(self, engine, renderer, make_input) -> None:
        data = make_input(institutionName="<script>alert(1)</script>")
        html = _render(engine, renderer, data)
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "<script>" not in html

    def test_specific_concerns_are_escaped(self, engine, renderer, make_input) -> None:
        data = make_input(specificConcerns="Tom & \"Jerry's\" <b>notes</b>")
        html = _render(engine, renderer, data)
        assert "Tom &amp; &#34;Jerry&#39;s&#34; &lt;b&gt;notes&lt;/b&gt;" in html
        assert "<b>notes</b>" not in html

    def test_unknown_institution_type_is_escaped(self, engine, renderer, make_input) -> None:
        data = make_input(institutionType="<i>guild</i>")
        html = _render(engine, renderer, data)
        assert "<p><strong>Type:</strong> &lt;i&gt;guild&lt;/i&gt;</p>" in html


class TestStructure:
    def test_header_and_type_label(self, engine, renderer, make_input) -> None:
        data = make_input(institutionName="St. Mary's Health", institutionType="healthcare")
        html = _render(engine, renderer, data)
        assert "<h4>Institution: St. Mary&#39;s Health</h4>" in html
        assert "<p><strong>Type:</strong> Healthcare System</p>" in html

    def test_primary_classification(self, engine, renderer, make_input) -> None:
        html = _render(engine, renderer, make_input())
        assert "<p><strong>Class A: Boundary-Respecting Behaviors</strong></p>" in html

    def test_sub_classification_items(self, engine, renderer, make_input) -> None:
        data = make_input(observedBehaviors="acted outside its mandate")
        html = _render(engine, renderer, data)
        assert (
            "<li><strong>C1:</strong> Scope Overreach - "
            "Exercise of judgment beyond legitimate authority</li>"
        ) in html
        assert html.count("<li>") == 2 + 5

    def test_sections_in_order(self, engine, renderer, make_input) -> None:
        data = make_input(specificConcerns="Appeals are slow.")
        html = _render(engine, renderer, data)
        headings = [
            "<h4>Institution:",
            "<h4>Primary Classification</h4>",
            "<h4>Analysis</h4>",
            "<h4>Sub-Classifications</h4>",
            "<h4>Preliminary Recommendations</h4>",
            "<h4>Specific Concerns Addressed</h4>",
            "<h4>Next Steps</h4>",
        ]
        positions = [html.index(h) for h in headings]
        assert positions == sorted(positions)

    def test_next_steps_sentence(self, engine, renderer, make_input) -> None:
        html = _render(engine, renderer, make_input())
        assert "<p>This preliminary assessment suggests continued maintenance of current practices" in html

    def test_concerns_section_omitted_without_concerns(self, engine, renderer, make_input) -> None:
        html = _render(engine, renderer, make_input())
        assert "Specific Concerns Addressed" not in html

    def test_concerns_alignment_for_class_a(self, engine, renderer, make_input) -> None:
        html = _render(engine, renderer, make_input(specificConcerns="Slow appeals."))
        assert "align with the boundary-respecting behaviors" in html

    def test_concerns_alignment_for_other_classes(self, engine, renderer, make_input) -> None:
        data = make_input(
            observedBehaviors="the policy is unclear and application varies",
            specificConcerns="Slow appeals.",
        )
        html = _render(engine, renderer, data)
        assert "align with the boundary-ambiguous or boundary-violating behaviors" in html

    def test_rendering_is_deterministic(self, engine, make_input) -> None:
        data = make_input(specificConcerns="Slow appeals.")
        first = _render(engine, DiagnosticRenderer(), data)
        second = _render(engine, DiagnosticRenderer(), data)
        assert first == second


class TestInstitutionTypeLabels:
    def test_known_types(self) -> None:
        assert format_institution_type("academic") == "Academic Institution"
        assert format_institution_type("regulatory") == "Regulatory/Licensing Body"
        assert format_institution_type("other") == "Other"

    def test_unknown_type_is_literal(self) -> None:
        assert format_institution_type("cooperative") == "cooperative"
