"""AriaValidRule: ARIA roles and attributes must be valid (WCAG 4.1.1 / 4.1.2).

Checks role tokens against the WAI-ARIA 1.1 role vocabulary, ``aria-*``
attribute names and values against the attribute table, and id references
against the ids present in the document.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import Tag

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import ParsedFile, Severity, Violation
from accesshtml.rules import register_rule
from accesshtml.rules.base import has_document, make_violation
from accesshtml.rules.catalog import default_severity

_TRUE_FALSE = ("true", "false")
_TRISTATE = ("true", "false", "mixed", "undefined")


@dataclass(frozen=True)
class AriaAttribute:
    """Value constraints for one aria-* attribute."""

    value_type: str  # string | number | integer | token | token-list | idref | idref-list
    allowed_values: tuple[str, ...] = ()

    @property
    def is_reference(self) -> bool:
        return self.value_type in ("idref", "idref-list")


ARIA_ATTRIBUTES: dict[str, AriaAttribute] = {
    "aria-activedescendant": AriaAttribute("idref"),
    "aria-atomic": AriaAttribute("token", _TRUE_FALSE),
    "aria-autocomplete": AriaAttribute("token", ("inline", "list", "both", "none")),
    "aria-busy": AriaAttribute("token", _TRUE_FALSE),
    "aria-checked": AriaAttribute("token", _TRISTATE),
    "aria-colcount": AriaAttribute("integer"),
    "aria-colindex": AriaAttribute("integer"),
    "aria-colspan": AriaAttribute("integer"),
    "aria-controls": AriaAttribute("idref-list"),
    "aria-current": AriaAttribute(
        "token", ("page", "step", "location", "date", "time", "true", "false")
    ),
    "aria-describedby": AriaAttribute("idref-list"),
    "aria-details": AriaAttribute("idref"),
    "aria-disabled": AriaAttribute("token", _TRUE_FALSE),
    "aria-dropeffect": AriaAttribute("token-list", ("copy", "execute", "link", "move", "none", "popup")),
    "aria-errormessage": AriaAttribute("idref"),
    "aria-expanded": AriaAttribute("token", ("true", "false", "undefined")),
    "aria-flowto": AriaAttribute("idref-list"),
    "aria-grabbed": AriaAttribute("token", ("true", "false", "undefined")),
    "aria-haspopup": AriaAttribute(
        "token", ("false", "true", "menu", "listbox", "tree", "grid", "dialog")
    ),
    "aria-hidden": AriaAttribute("token", _TRUE_FALSE),
    "aria-invalid": AriaAttribute("token", ("true", "false", "grammar", "spelling")),
    "aria-keyshortcuts": AriaAttribute("string"),
    "aria-label": AriaAttribute("string"),
    "aria-labelledby": AriaAttribute("idref-list"),
    "aria-level": AriaAttribute("integer"),
    "aria-live": AriaAttribute("token", ("off", "polite", "assertive")),
    "aria-modal": AriaAttribute("token", _TRUE_FALSE),
    "aria-multiline": AriaAttribute("token", _TRUE_FALSE),
    "aria-multiselectable": AriaAttribute("token", _TRUE_FALSE),
    "aria-orientation": AriaAttribute("token", ("horizontal", "vertical", "undefined")),
    "aria-owns": AriaAttribute("idref-list"),
    "aria-placeholder": AriaAttribute("string"),
    "aria-posinset": AriaAttribute("integer"),
    "aria-pressed": AriaAttribute("token", _TRISTATE),
    "aria-readonly": AriaAttribute("token", _TRUE_FALSE),
    "aria-relevant": AriaAttribute("token-list", ("additions", "removals", "text", "all")),
    "aria-required": AriaAttribute("token", _TRUE_FALSE),
    "aria-roledescription": AriaAttribute("string"),
    "aria-rowcount": AriaAttribute("integer"),
    "aria-rowindex": AriaAttribute("integer"),
    "aria-rowspan": AriaAttribute("integer"),
    "aria-selected": AriaAttribute("token", ("true", "false", "undefined")),
    "aria-setsize": AriaAttribute("integer"),
    "aria-sort": AriaAttribute("token", ("ascending", "descending", "none", "other")),
    "aria-valuemax": AriaAttribute("number"),
    "aria-valuemin": AriaAttribute("number"),
    "aria-valuenow": AriaAttribute("number"),
    "aria-valuetext": AriaAttribute("string"),
}

VALID_ROLES = frozenset({
    "alert", "alertdialog", "application", "article", "banner", "button", "cell",
    "checkbox", "columnheader", "combobox", "complementary", "contentinfo",
    "definition", "dialog", "directory", "document", "feed", "figure", "form",
    "grid", "gridcell", "group", "heading", "img", "link", "list", "listbox",
    "listitem", "log", "main", "marquee", "math", "menu", "menubar", "menuitem",
    "menuitemcheckbox", "menuitemradio", "navigation", "none", "note", "option",
    "presentation", "progressbar", "radio", "radiogroup", "region", "row",
    "rowgroup", "rowheader", "scrollbar", "search", "searchbox", "separator",
    "slider", "spinbutton", "status", "switch", "tab", "table", "tablist",
    "tabpanel", "term", "textbox", "timer", "toolbar", "tooltip", "tree",
    "treegrid", "treeitem",
})

_FOCUSABLE_TAGS = frozenset({"a", "button", "input", "select", "textarea"})
_LABEL_ATTRIBUTES = ("aria-label", "aria-labelledby")


@register_rule
class AriaValidRule:
    @property
    def id(self) -> str:
        return "aria-valid"

    def evaluate(self, file: ParsedFile, analyzer: HTMLAnalyzer) -> list[Violation]:
        if not has_document(file):
            return []

        violations: list[Violation] = []
        for element in analyzer.query(file.document, "*"):
            aria_names = [name for name in element.attrs if name.startswith("aria-")]
            if not aria_names and not analyzer.has_attribute(element, "role"):
                continue

            self._check_roles(element, analyzer, violations)
            for name in aria_names:
                self._check_attribute(element, name, file.document, analyzer, violations)
            self._check_conflicts(element, analyzer, violations)

        return violations

    def _check_roles(self, element: Tag, analyzer: HTMLAnalyzer, violations: list[Violation]) -> None:
        role = analyzer.attribute(element, "role")
        if not role:
            return
        for token in role.split():
            if token not in VALID_ROLES:
                violations.append(make_violation(
                    self.id, default_severity(self.id),
                    f'Invalid ARIA role: "{token}"',
                    element, analyzer,
                    suggestion=(
                        "Use a valid ARIA role. Valid roles include: "
                        f"{', '.join(sorted(VALID_ROLES)[:10])}, etc."
                    ),
                ))

    def _check_attribute(
        self,
        element: Tag,
        name: str,
        document: Tag,
        analyzer: HTMLAnalyzer,
        violations: list[Violation],
    ) -> None:
        severity = default_severity(self.id)
        definition = ARIA_ATTRIBUTES.get(name)
        if definition is None:
            violations.append(make_violation(
                self.id, severity,
                f'Invalid ARIA attribute: "{name}"',
                element, analyzer,
                suggestion="Remove the invalid ARIA attribute or use a valid one",
            ))
            return

        value = (analyzer.attribute(element, name) or "").strip()

        if definition.allowed_values:
            tokens = (value.split() or [value]) if definition.value_type == "token-list" else [value]
            allowed = ", ".join(definition.allowed_values)
            for token in tokens:
                if token in definition.allowed_values:
                    continue
                violations.append(make_violation(
                    self.id, severity,
                    f'Invalid value "{token}" for ARIA attribute "{name}". '
                    f"Allowed values: {allowed}",
                    element, analyzer,
                    suggestion=f"Use one of the allowed values: {allowed}",
                ))
        elif definition.value_type in ("number", "integer") and not _is_numeric(value, definition.value_type):
            violations.append(make_violation(
                self.id, severity,
                f'Invalid value "{value}" for ARIA attribute "{name}". Expected a {definition.value_type}',
                element, analyzer,
                suggestion=f"Set {name} to a {definition.value_type} value",
            ))

        if definition.is_reference:
            refs = value.split() if definition.value_type == "idref-list" else ([value] if value else [])
            for ref in refs:
                if analyzer.element_by_id(document, ref) is None:
                    violations.append(make_violation(
                        self.id, Severity.ERROR,
                        f'{name} references non-existent ID: "{ref}"',
                        element, analyzer,
                        suggestion=f'Ensure element with id="{ref}" exists or remove the reference',
                    ))

        if not value and name in _LABEL_ATTRIBUTES:
            violations.append(make_violation(
                self.id, Severity.WARNING,
                f"Empty {name} attribute provides no accessibility benefit",
                element, analyzer,
                suggestion=f"Provide meaningful text for {name} or remove the attribute",
            ))

    def _check_conflicts(self, element: Tag, analyzer: HTMLAnalyzer, violations: list[Violation]) -> None:
        if analyzer.attribute(element, "aria-label") and analyzer.attribute(element, "aria-labelledby"):
            violations.append(make_violation(
                self.id, Severity.WARNING,
                "Element has both aria-label and aria-labelledby. aria-labelledby takes precedence.",
                element, analyzer,
                suggestion="Use either aria-label or aria-labelledby, not both",
            ))

        if analyzer.attribute(element, "aria-hidden") == "true" and self._is_focusable(element, analyzer):
            violations.append(make_violation(
                self.id, Severity.ERROR,
                'Focusable element should not have aria-hidden="true"',
                element, analyzer,
                suggestion='Remove aria-hidden="true" from focusable elements or make them non-focusable',
            ))

    @staticmethod
    def _is_focusable(element: Tag, analyzer: HTMLAnalyzer) -> bool:
        if element.name in _FOCUSABLE_TAGS:
            return True
        tabindex = analyzer.attribute(element, "tabindex")
        if tabindex is None:
            return False
        try:
            return int(tabindex.strip()) >= 0
        except ValueError:
            return False


def _is_numeric(value: str, value_type: str) -> bool:
    try:
        if value_type == "integer":
            int(value)
        else:
            float(value)
    except ValueError:
        return False
    return True
