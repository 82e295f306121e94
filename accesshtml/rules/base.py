"""Base protocol and helpers shared by accessibility rules."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bs4 import Tag

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import FileType, ParsedFile, Severity, Violation


@runtime_checkable
class Rule(Protocol):
    """Interface that every accessibility rule must implement.

    Each rule checks a single WCAG concern (alt text, labels, headings, etc.).
    Rules receive a ParsedFile with its document attached and an analyzer,
    and return the violations they found.  Rules hold no per-scan state and
    may be reused across files.
    """

    @property
    def id(self) -> str:
        """Stable rule id, matching its entry in the rule catalog."""
        ...

    def evaluate(self, file: ParsedFile, analyzer: HTMLAnalyzer) -> list[Violation]:
        """Return violations for *file*.

        Must return an empty list for non-HTML files and for files without
        an attached document.  Unexpected exceptions are allowed to
        propagate; the engine isolates them per rule.
        """
        ...


def has_document(file: ParsedFile) -> bool:
    return file.type == FileType.HTML and file.document is not None


def make_violation(
    rule_id: str,
    severity: Severity,
    message: str,
    node: Tag,
    analyzer: HTMLAnalyzer,
    *,
    suggestion: str | None = None,
    selector: str | None = None,
    line: int | None = None,
) -> Violation:
    """Build a Violation located at *node*.

    Passing *line* reports the violation at that line with no column, for
    findings about the whole document rather than *node* itself.
    """
    column = analyzer.column_number(node) if line is None else None
    return Violation(
        rule_id=rule_id,
        severity=severity,
        message=message,
        element=analyzer.context(node),
        selector=selector if selector is not None else analyzer.selector(node),
        line=line if line is not None else analyzer.line_number(node),
        column=column,
        suggestion=suggestion,
    )
