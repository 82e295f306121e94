"""Shared data models used across the AccessHTML scanner."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any


class Severity(str, enum.Enum):
    """Severity level for accessibility violations."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ComplianceLevel(str, enum.Enum):
    """WCAG conformance level. Levels are cumulative: A < AA < AAA."""

    A = "A"
    AA = "AA"
    AAA = "AAA"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]


_LEVEL_RANK = {ComplianceLevel.A: 1, ComplianceLevel.AA: 2, ComplianceLevel.AAA: 3}


class FileType(str, enum.Enum):
    """Kind of source file produced by discovery."""

    HTML = "html"
    CSS = "css"
    JS = "js"
    JSX = "jsx"
    TS = "ts"
    TSX = "tsx"


@dataclass(frozen=True)
class ParsedFile:
    """A discovered source file, optionally with its parsed document attached."""

    file_path: str
    content: str
    type: FileType
    document: Any | None = None  # bs4.BeautifulSoup once parsed

    def with_document(self, document: Any) -> ParsedFile:
        """Return a copy of this file with *document* attached."""
        return replace(self, document=document)


@dataclass(frozen=True)
class WCAGRule:
    """Static metadata describing one accessibility rule."""

    id: str
    name: str
    description: str
    level: ComplianceLevel
    severity: Severity
    help_url: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class Violation:
    """A single accessibility violation found by a rule."""

    rule_id: str
    severity: Severity
    message: str
    element: str | None = None
    selector: str | None = None
    line: int | None = None
    column: int | None = None
    suggestion: str | None = None


@dataclass
class RuleOutcome:
    """Result of running one rule against one file.

    A rule either completes with a (possibly empty) list of violations or
    fails with a diagnostic message in ``error``.
    """

    rule_id: str
    violations: list[Violation] = field(default_factory=list)
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def passed(self) -> bool:
        return self.succeeded and not self.violations


@dataclass
class FileResult:
    """All findings for one scanned file."""

    file_path: str
    violations: list[Violation] = field(default_factory=list)
    passed_rules: list[str] = field(default_factory=list)
    skipped_rules: list[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.WARNING)


@dataclass
class ScanSummary:
    """Counts across every file in a scan."""

    total_files: int = 0
    total_violations: int = 0
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    passed_rules: int = 0
    failed_rules: int = 0


@dataclass
class ComplianceReport:
    """Compliance score for the target level, with a per-level breakdown."""

    level: ComplianceLevel = ComplianceLevel.AA
    percentage: float = 100.0
    breakdown: dict[ComplianceLevel, float] = field(default_factory=dict)


@dataclass
class ScanResult:
    """Complete result of one scan invocation."""

    files: list[FileResult] = field(default_factory=list)
    summary: ScanSummary = field(default_factory=ScanSummary)
    compliance: ComplianceReport = field(default_factory=ComplianceReport)

    @property
    def violations(self) -> list[Violation]:
        out: list[Violation] = []
        for f in self.files:
            out.extend(f.violations)
        return out
