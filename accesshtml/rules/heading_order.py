"""HeadingOrderRule: headings must form a logical outline (WCAG 2.4.6)."""

from __future__ import annotations

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import ParsedFile, Severity, Violation
from accesshtml.rules import register_rule
from accesshtml.rules.base import has_document, make_violation
from accesshtml.rules.catalog import default_severity


@register_rule
class HeadingOrderRule:
    @property
    def id(self) -> str:
        return "heading-order"

    def evaluate(self, file: ParsedFile, analyzer: HTMLAnalyzer) -> list[Violation]:
        if not has_document(file):
            return []

        headings = [
            h for h in analyzer.query(file.document, "h1, h2, h3, h4, h5, h6")
            if analyzer.is_visible(h)
        ]
        if not headings:
            return []

        violations: list[Violation] = []
        severity = default_severity(self.id)

        previous_level = 0
        for i, heading in enumerate(headings):
            level = int(heading.name[1])

            if level == 1 and i > 0:
                violations.append(make_violation(
                    self.id, Severity.WARNING,
                    "H1 should typically be the first heading on the page",
                    heading, analyzer,
                    suggestion="Consider using H1 as the main page heading",
                ))

            if i > 0 and level > previous_level + 1:
                violations.append(make_violation(
                    self.id, severity,
                    f"Heading level {level} follows heading level {previous_level}, "
                    f"skipping level {previous_level + 1}",
                    heading, analyzer,
                    suggestion=(
                        f"Use H{previous_level + 1} instead of H{level}, "
                        "or add intermediate heading levels"
                    ),
                ))

            previous_level = level

        h1s = [h for h in headings if h.name == "h1"]
        if not h1s:
            violations.append(make_violation(
                self.id, Severity.WARNING,
                "Page should have at least one H1 heading",
                headings[0], analyzer,
                suggestion="Add an H1 heading to establish the main topic of the page",
                selector="document",
                line=1,
            ))

        for extra in h1s[1:]:
            violations.append(make_violation(
                self.id, Severity.WARNING,
                "Multiple H1 headings found, consider using H2-H6 for subheadings",
                extra, analyzer,
                suggestion="Use only one H1 per page, or use H2-H6 for section headings",
            ))

        for heading in headings:
            if not analyzer.text_content(heading):
                violations.append(make_violation(
                    self.id, severity,
                    "Heading element is empty",
                    heading, analyzer,
                    suggestion="Add descriptive text to the heading",
                ))

        return violations
