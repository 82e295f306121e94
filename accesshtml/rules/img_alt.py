"""ImgAltRule: images must carry alternative text (WCAG 1.1.1)."""

from __future__ import annotations

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import ParsedFile, Severity, Violation
from accesshtml.rules import register_rule
from accesshtml.rules.base import has_document, make_violation
from accesshtml.rules.catalog import default_severity

MAX_ALT_LENGTH = 125

_DECORATIVE_ROLES = frozenset({"presentation", "none"})


@register_rule
class ImgAltRule:
    @property
    def id(self) -> str:
        return "img-alt"

    def evaluate(self, file: ParsedFile, analyzer: HTMLAnalyzer) -> list[Violation]:
        if not has_document(file):
            return []

        violations: list[Violation] = []
        severity = default_severity(self.id)

        for img in analyzer.query(file.document, "img"):
            if not analyzer.is_visible(img):
                continue

            alt = analyzer.attribute(img, "alt")
            src = analyzer.attribute(img, "src")
            role = analyzer.attribute(img, "role")
            aria_label = (analyzer.attribute(img, "aria-label") or "").strip()
            aria_labelledby = (analyzer.attribute(img, "aria-labelledby") or "").strip()

            is_decorative = role in _DECORATIVE_ROLES or alt == ""

            if alt is None and not aria_label and not aria_labelledby and not is_decorative:
                description = f"Description of {src}" if src else "Image description"
                violations.append(make_violation(
                    self.id, severity,
                    "Image must have an alt attribute or be marked as decorative",
                    img, analyzer,
                    suggestion=f'Add alt="{description}" or role="presentation" if decorative',
                ))
            elif alt is not None and not alt.strip() and not is_decorative:
                # Whitespace-only alt: neither a description nor a decorative marker
                violations.append(make_violation(
                    self.id, Severity.WARNING,
                    "Image has empty alt text but is not marked as decorative",
                    img, analyzer,
                    suggestion='Add meaningful alt text or use role="presentation" if decorative',
                ))
            elif alt is not None and len(alt.strip()) > MAX_ALT_LENGTH:
                violations.append(make_violation(
                    self.id, Severity.INFO,
                    f"Alt text is longer than {MAX_ALT_LENGTH} characters, "
                    "consider using a shorter description",
                    img, analyzer,
                    suggestion="Keep alt text concise and descriptive",
                ))

        return violations
