"""Tests for ColorContrastRule."""

from __future__ import annotations

import pytest

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import Severity
from accesshtml.rules.color_contrast import ColorContrastRule
from tests.utils.helpers import ParseHTML

rule = ColorContrastRule()


class TestNormalText:
    def test_default_colors_pass(self, analyzer: HTMLAnalyzer, page: ParseHTML) -> None:
        assert rule.evaluate(page("<p>Black on white</p>"), analyzer) == []

    def test_light_gray_is_error(self, analyzer: HTMLAnalyzer, page: ParseHTML) -> None:
        violations = rule.evaluate(page('<p style="color: #cccccc">Faint</p>'), analyzer)
        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR
        assert violations[0].message.startswith("Insufficient color contrast: 1.6")
        assert "(minimum: 4.5:1)" in violations[0].message
        assert "#cccccc" in violations[0].suggestion
        assert "#ffffff" in violations[0].suggestion

    def test_near_threshold_is_warning(self, analyzer: HTMLAnalyzer, page: ParseHTML) -> None:
        # #767676 on white is about 4.54:1
        violations = rule.evaluate(page('<p style="color: #767676">Gray</p>'), analyzer)
        assert len(violations) == 1
        assert violations[0].severity == Severity.WARNING
        assert "Low color contrast" in violations[0].message

    def test_named_color(self, analyzer: HTMLAnalyzer, page: ParseHTML) -> None:
        violations = rule.evaluate(page('<span style="color: yellow">Warn</span>'), analyzer)
        assert [v.severity for v in violations] == [Severity.ERROR]


class TestLargeText:
    # #888888 on white is about 3.54:1: fails normal text, passes large text.
    @pytest.mark.parametrize("style", [
        "font-size: 24px",
        "font-size: 18pt",
        "font-size: 19px; font-weight: bold",
        "font-size: 20px; font-weight: 700",
    ])
    def test_large_text_uses_lower_minimum(
        self, analyzer: HTMLAnalyzer, page: ParseHTML, style: str
    ) -> None:
        parsed = page(f'<p style="color: #888888; {style}">Large</p>')
        assert rule.evaluate(parsed, analyzer) == []

    @pytest.mark.parametrize("style", [
        "font-size: 19px",
        "font-size: 18px; font-weight: bold",
        "font-size: 2em",
    ])
    def test_normal_text_minimum(self, analyzer: HTMLAnalyzer, page: ParseHTML, style: str) -> None:
        parsed = page(f'<p style="color: #888888; {style}">Small</p>')
        violations = rule.evaluate(parsed, analyzer)
        assert [v.severity for v in violations] == [Severity.ERROR]

    def test_large_text_minimum_in_message(self, analyzer: HTMLAnalyzer, page: ParseHTML) -> None:
        parsed = page('<p style="color: #cccccc; font-size: 24px">Big</p>')
        [violation] = rule.evaluate(parsed, analyzer)
        assert violation.severity == Severity.ERROR
        assert violation.message.endswith("(minimum: 3:1)")


class TestBackground:
    def test_background_from_ancestor(self, analyzer: HTMLAnalyzer, page: ParseHTML) -> None:
        parsed = page(
            '<div style="background-color: #000000; color: #ffffff">'
            '<p style="color: #333333">Dark on dark</p></div>'
        )
        violations = rule.evaluate(parsed, analyzer)
        assert len(violations) == 1
        assert violations[0].element.startswith("<p")
        assert "#000000" in violations[0].suggestion

    def test_transparent_background_skipped(self, analyzer: HTMLAnalyzer, page: ParseHTML) -> None:
        parsed = page(
            '<div style="background-color: #000000; color: #ffffff">'
            '<p style="background-color: transparent; color: #ffffff">Light</p></div>'
        )
        assert rule.evaluate(parsed, analyzer) == []

    def test_walk_stops_at_body(self, analyzer: HTMLAnalyzer, parse_html: ParseHTML) -> None:
        parsed = parse_html(
            '<html><body style="background-color: #000000"><p>Text</p></body></html>'
        )
        assert rule.evaluate(parsed, analyzer) == []


class TestSkipped:
    @pytest.mark.parametrize("markup", [
        '<p style="color: not-a-color">Unknown</p>',
        '<p style="color: #ccc; background-color: nonsense">Unknown</p>',
        '<p style="color: transparent">Invisible ink</p>',
        '<p style="color: #cccccc; display: none">Hidden</p>',
        '<p style="color: #cccccc"></p>',
        '<em style="color: #cccccc">Not in the text tag set</em>',
    ])
    def test_no_violation(self, analyzer: HTMLAnalyzer, page: ParseHTML, markup: str) -> None:
        assert rule.evaluate(page(markup), analyzer) == []

    def test_stylesheet_colors_not_resolved(self, analyzer: HTMLAnalyzer, parse_html: ParseHTML) -> None:
        parsed = parse_html(
            "<html><head><style>p { color: #eeeeee; }</style></head>"
            "<body><p>Styled elsewhere</p></body></html>"
        )
        assert rule.evaluate(parsed, analyzer) == []
