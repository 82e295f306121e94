"""Static catalog of WCAG 2.1 rule metadata.

The catalog is fixed data: it is built once at import time and exposed as a
read-only mapping.
"""

from __future__ import annotations

from types import MappingProxyType

from accesshtml.models import ComplianceLevel, Severity, WCAGRule

_UNDERSTANDING = "https://www.w3.org/WAI/WCAG21/Understanding"

_RULES = (
    WCAGRule(
        id="img-alt",
        name="Images must have alternative text",
        description="All img elements must have an alt attribute or be marked as decorative",
        level=ComplianceLevel.A,
        severity=Severity.ERROR,
        help_url=f"{_UNDERSTANDING}/non-text-content.html",
        tags=("images", "alt-text", "wcag111"),
    ),
    WCAGRule(
        id="heading-order",
        name="Headings must be in correct order",
        description="Heading levels should not be skipped and should follow logical order",
        level=ComplianceLevel.AA,
        severity=Severity.ERROR,
        help_url=f"{_UNDERSTANDING}/headings-and-labels.html",
        tags=("headings", "structure", "wcag246"),
    ),
    WCAGRule(
        id="form-label",
        name="Form inputs must have labels",
        description="All form inputs must have associated labels or aria-label attributes",
        level=ComplianceLevel.A,
        severity=Severity.ERROR,
        help_url=f"{_UNDERSTANDING}/labels-or-instructions.html",
        tags=("forms", "labels", "wcag332"),
    ),
    WCAGRule(
        id="link-name",
        name="Links must have accessible names",
        description="All links must have text or an accessible name",
        level=ComplianceLevel.A,
        severity=Severity.ERROR,
        help_url=f"{_UNDERSTANDING}/link-purpose-in-context.html",
        tags=("links", "accessibility", "wcag244"),
    ),
    WCAGRule(
        id="color-contrast",
        name="Text must have sufficient color contrast",
        description=(
            "Text must have a contrast ratio of at least 4.5:1 for normal text "
            "and 3:1 for large text"
        ),
        level=ComplianceLevel.AA,
        severity=Severity.ERROR,
        help_url=f"{_UNDERSTANDING}/contrast-minimum.html",
        tags=("color", "contrast", "wcag143"),
    ),
    WCAGRule(
        id="aria-valid",
        name="ARIA attributes must be valid",
        description="ARIA attributes must have valid values and be used correctly",
        level=ComplianceLevel.A,
        severity=Severity.ERROR,
        help_url=f"{_UNDERSTANDING}/parsing.html",
        tags=("aria", "validation", "wcag411"),
    ),
)

WCAG_RULES: MappingProxyType[str, WCAGRule] = MappingProxyType({r.id: r for r in _RULES})


def rules_by_level(level: ComplianceLevel) -> list[WCAGRule]:
    """Every rule at or below *level* (requesting AA also returns A rules)."""
    return [r for r in WCAG_RULES.values() if r.level.rank <= level.rank]


def rule_by_id(rule_id: str) -> WCAGRule | None:
    return WCAG_RULES.get(rule_id)


def default_severity(rule_id: str) -> Severity:
    """Catalog severity for *rule_id*, ERROR for ids outside the catalog."""
    rule = WCAG_RULES.get(rule_id)
    return rule.severity if rule is not None else Severity.ERROR
