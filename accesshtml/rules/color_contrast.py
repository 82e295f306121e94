"""ColorContrastRule: text must contrast with its background (WCAG 1.4.3).

Only inline ``style`` attributes are read. Colors set by ``<style>`` blocks or
linked stylesheets are not resolved, so the foreground defaults to black and
the background to white whenever no inline declaration is present.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import Tag

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import ParsedFile, Severity, Violation
from accesshtml.rules import register_rule
from accesshtml.rules.base import has_document, make_violation
from accesshtml.rules.catalog import default_severity
from accesshtml.utils.contrast import (
    BLACK,
    RGB,
    WHITE,
    contrast_ratio,
    is_transparent,
    minimum_ratio,
    parse_css_color,
    to_hex,
)
from accesshtml.utils.style import font_size_px, is_bold, parse_inline_style

logger = logging.getLogger(__name__)

_TEXT_SELECTOR = "p, span, div, h1, h2, h3, h4, h5, h6, a, button, label, li, td, th"

LARGE_TEXT_PX = 24.0
LARGE_BOLD_TEXT_PX = 19.0
# Ratios this close above the minimum are reported as warnings
WARNING_MARGIN = 0.5


@dataclass(frozen=True)
class _Contrast:
    ratio: float
    foreground: RGB
    background: RGB


@register_rule
class ColorContrastRule:
    @property
    def id(self) -> str:
        return "color-contrast"

    def evaluate(self, file: ParsedFile, analyzer: HTMLAnalyzer) -> list[Violation]:
        if not has_document(file):
            return []

        violations: list[Violation] = []
        severity = default_severity(self.id)
        body = file.document.find("body")

        for element in analyzer.query(file.document, _TEXT_SELECTOR):
            if not analyzer.is_visible(element) or not analyzer.text_content(element):
                continue

            contrast = self._measure(element, body, analyzer)
            if contrast is None:
                continue

            minimum = minimum_ratio(large_text=self._is_large_text(element, analyzer))
            fg, bg = to_hex(contrast.foreground), to_hex(contrast.background)

            if contrast.ratio < minimum:
                violations.append(make_violation(
                    self.id, severity,
                    f"Insufficient color contrast: {contrast.ratio:.2f}:1 "
                    f"(minimum: {minimum:g}:1)",
                    element, analyzer,
                    suggestion=f"Increase contrast between text ({fg}) and background ({bg})",
                ))
            elif contrast.ratio < minimum + WARNING_MARGIN:
                violations.append(make_violation(
                    self.id, Severity.WARNING,
                    f"Low color contrast: {contrast.ratio:.2f}:1 "
                    f"(close to minimum: {minimum:g}:1)",
                    element, analyzer,
                    suggestion="Consider increasing contrast for better accessibility",
                ))

        return violations

    def _measure(self, element: Tag, body: Tag | None, analyzer: HTMLAnalyzer) -> _Contrast | None:
        """Contrast of *element*'s text, or None if its colors can't be resolved."""
        style = parse_inline_style(analyzer.attribute(element, "style"))
        color_value = style.get("color")
        try:
            foreground = parse_css_color(color_value) if color_value else BLACK
            background = self._background(element, body, analyzer)
        except ValueError:
            logger.debug("Unparseable color on %s", analyzer.selector(element), exc_info=True)
            return None

        if foreground is None:
            return None

        ratio = round(contrast_ratio(foreground, background), 2)
        return _Contrast(ratio=ratio, foreground=foreground, background=background)

    @staticmethod
    def _background(element: Tag, body: Tag | None, analyzer: HTMLAnalyzer) -> RGB:
        """First opaque inline background-color from *element* up to <body>."""
        for node in (element, *analyzer.ancestors(element)):
            if node is body:
                break
            value = parse_inline_style(analyzer.attribute(node, "style")).get("background-color")
            if is_transparent(value):
                continue
            color = parse_css_color(value)
            if color is not None:
                return color
        return WHITE

    @staticmethod
    def _is_large_text(element: Tag, analyzer: HTMLAnalyzer) -> bool:
        # 18pt (24px) or 14pt (~19px) bold
        style = parse_inline_style(analyzer.attribute(element, "style"))
        size = font_size_px(style.get("font-size"))
        return size >= LARGE_TEXT_PX or (size >= LARGE_BOLD_TEXT_PX and is_bold(style.get("font-weight")))
