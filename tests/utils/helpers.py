"""Small assertion helpers shared by rule tests."""

from __future__ import annotations

from collections.abc import Callable

from accesshtml.models import ParsedFile, Severity, Violation

ParseHTML = Callable[..., ParsedFile]


def by_severity(violations: list[Violation], severity: Severity) -> list[Violation]:
    return [v for v in violations if v.severity == severity]


def messages(violations: list[Violation]) -> list[str]:
    return [v.message for v in violations]
