"""LinkNameRule: links must have a descriptive accessible name (WCAG 2.4.4)."""

from __future__ import annotations

from bs4 import Tag

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import ParsedFile, Severity, Violation
from accesshtml.rules import register_rule
from accesshtml.rules.base import has_document, make_violation
from accesshtml.rules.catalog import default_severity

_GENERIC_LINK_TEXTS = frozenset({
    "click here",
    "read more",
    "more",
    "link",
    "here",
    "this",
    "continue",
    "go",
    "next",
    "previous",
    "prev",
})


@register_rule
class LinkNameRule:
    @property
    def id(self) -> str:
        return "link-name"

    def evaluate(self, file: ParsedFile, analyzer: HTMLAnalyzer) -> list[Violation]:
        if not has_document(file):
            return []

        violations: list[Violation] = []
        severity = default_severity(self.id)

        for link in analyzer.query(file.document, "a[href]"):
            if not analyzer.is_visible(link):
                continue

            name = self.accessible_name(link, file.document, analyzer)
            if not name:
                violations.append(make_violation(
                    self.id, severity,
                    "Link must have accessible text or an accessible name",
                    link, analyzer,
                    suggestion="Add text content, aria-label, aria-labelledby, or title attribute",
                ))
            elif name.lower() in _GENERIC_LINK_TEXTS:
                violations.append(make_violation(
                    self.id, Severity.WARNING,
                    "Link text is not descriptive enough",
                    link, analyzer,
                    suggestion="Use more descriptive link text that explains the link purpose",
                ))

        return violations

    @staticmethod
    def accessible_name(link: Tag, document: Tag, analyzer: HTMLAnalyzer) -> str:
        """Resolve the link's accessible name.

        Order: aria-label, aria-labelledby targets, image alt text plus the
        link's own text, then the title attribute.
        """
        aria_label = (analyzer.attribute(link, "aria-label") or "").strip()
        if aria_label:
            return aria_label

        labelledby = analyzer.attribute(link, "aria-labelledby")
        if labelledby:
            targets = [analyzer.element_by_id(document, ref) for ref in labelledby.split()]
            targets = [t for t in targets if t is not None]
            if targets:
                return " ".join(analyzer.text_content(t) for t in targets).strip()

        parts: list[str] = []
        for img in analyzer.query(link, "img[alt]"):
            alt = (analyzer.attribute(img, "alt") or "").strip()
            if alt:
                parts.append(alt)
        own_text = analyzer.text_content(link)
        if own_text:
            parts.append(own_text)
        text = " ".join(parts).strip()
        if text:
            return text

        return (analyzer.attribute(link, "title") or "").strip()
