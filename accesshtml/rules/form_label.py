"""FormLabelRule: form controls must have an accessible label (WCAG 3.3.2)."""

from __future__ import annotations

from bs4 import Tag

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import ParsedFile, Severity, Violation
from accesshtml.rules import register_rule
from accesshtml.rules.base import has_document, make_violation
from accesshtml.rules.catalog import default_severity

# Input types that are not labelable controls (buttons carry their own text)
_UNLABELED_INPUT_TYPES = frozenset({"hidden", "submit", "button", "reset"})


@register_rule
class FormLabelRule:
    @property
    def id(self) -> str:
        return "form-label"

    def evaluate(self, file: ParsedFile, analyzer: HTMLAnalyzer) -> list[Violation]:
        if not has_document(file):
            return []

        violations: list[Violation] = []
        severity = default_severity(self.id)

        for control in analyzer.query(file.document, "input, textarea, select"):
            if not self._is_labelable(control, analyzer):
                continue
            if not analyzer.is_visible(control):
                continue

            has_label = self._has_associated_label(control, file.document, analyzer)
            aria_label = analyzer.attribute(control, "aria-label")
            aria_labelledby = analyzer.attribute(control, "aria-labelledby")
            title = analyzer.attribute(control, "title")
            placeholder = analyzer.attribute(control, "placeholder")

            if has_label or aria_label or aria_labelledby:
                continue

            if title:
                violations.append(make_violation(
                    self.id, Severity.WARNING,
                    "Form input relies on title attribute for labeling, "
                    "consider using a proper label",
                    control, analyzer,
                    suggestion="Add a <label> element or aria-label for better accessibility",
                ))
            elif placeholder:
                violations.append(make_violation(
                    self.id, severity,
                    "Form input must have an associated label; "
                    "placeholder text is not an accessible label",
                    control, analyzer,
                    suggestion="Add a proper label in addition to the placeholder text",
                ))
            else:
                violations.append(make_violation(
                    self.id, severity,
                    "Form input must have an associated label",
                    control, analyzer,
                    suggestion="Add a <label> element, aria-label, aria-labelledby, or title attribute",
                ))

        return violations

    @staticmethod
    def _is_labelable(control: Tag, analyzer: HTMLAnalyzer) -> bool:
        if control.name != "input":
            return True
        input_type = (analyzer.attribute(control, "type") or "text").strip().lower()
        return input_type not in _UNLABELED_INPUT_TYPES

    @staticmethod
    def _has_associated_label(control: Tag, document: Tag, analyzer: HTMLAnalyzer) -> bool:
        control_id = analyzer.attribute(control, "id")
        if control_id and analyzer.labels_for(document, control_id):
            return True
        return any(parent.name == "label" for parent in analyzer.ancestors(control))
