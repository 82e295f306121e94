"""Compliance engine — runs registered rules over files and scores the scan."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from accesshtml.analyzer import HTMLAnalyzer, ParseError
from accesshtml.config import ScanConfig
from accesshtml.models import (
    ComplianceLevel,
    ComplianceReport,
    FileResult,
    FileType,
    ParsedFile,
    RuleOutcome,
    ScanResult,
    ScanSummary,
    Severity,
    Violation,
)
from accesshtml.rules.base import Rule
from accesshtml.rules.catalog import rule_by_id, rules_by_level

logger = logging.getLogger(__name__)

PARSE_ERROR_RULE_ID = "parse-error"


class ComplianceEngine:
    """Evaluates accessibility rules against parsed files.

    Usage::

        engine = ComplianceEngine(ScanConfig(level=ComplianceLevel.AA))
        for rule in default_rules():
            engine.register_rule(rule)
        result = engine.analyze_files(files)

    Files are processed one at a time and rules run in registration order,
    so violation order is deterministic.
    """

    def __init__(self, options: ScanConfig | None = None, analyzer: HTMLAnalyzer | None = None) -> None:
        self.options = options or ScanConfig()
        self.analyzer = analyzer or HTMLAnalyzer()
        self._rules: dict[str, Rule] = {}

    @property
    def rules(self) -> dict[str, Rule]:
        return dict(self._rules)

    def register_rule(self, rule: Rule) -> None:
        """Register *rule*, replacing any rule already registered under its id."""
        self._rules[rule.id] = rule

    def update_options(self, **changes: Any) -> None:
        """Shallow-merge *changes* into the options used by the next scan."""
        self.options = self.options.merged(**changes)

    def applicable_rules(self) -> dict[str, Rule]:
        """Registered rules selected by level, ignore list and allow list."""
        level_ids = {r.id for r in rules_by_level(self.options.level)}
        ignored = set(self.options.ignore_rules)
        allowed = set(self.options.rules)

        selected: dict[str, Rule] = {}
        for rule_id, rule in self._rules.items():
            if rule_id not in level_ids or rule_id in ignored:
                continue
            if allowed and rule_id not in allowed:
                continue
            selected[rule_id] = rule
        return selected

    def analyze_files(self, files: Iterable[ParsedFile]) -> ScanResult:
        """Analyze *files* in order and aggregate a ScanResult."""
        applicable = self.applicable_rules()
        file_results = [self.analyze_file(f, applicable) for f in files]
        return self._build_result(file_results, applicable)

    def analyze_file(self, file: ParsedFile, rules: dict[str, Rule] | None = None) -> FileResult:
        """Analyze a single file with *rules* (defaults to the applicable rules)."""
        if rules is None:
            rules = self.applicable_rules()

        result = FileResult(file_path=file.file_path)

        if file.type == FileType.HTML and file.document is None:
            try:
                file = self.analyzer.parse(file)
            except ParseError as exc:
                logger.warning("Skipping rules for %s: %s", file.file_path, exc)
                result.violations.append(Violation(
                    rule_id=PARSE_ERROR_RULE_ID,
                    severity=Severity.ERROR,
                    message=f"Failed to parse HTML: {exc.reason}",
                    line=1,
                    column=1,
                ))
                return result

        for rule in rules.values():
            outcome = self.run_rule(rule, file)
            if not outcome.succeeded:
                result.skipped_rules.append(outcome.rule_id)
            elif outcome.passed:
                result.passed_rules.append(outcome.rule_id)
            else:
                result.violations.extend(outcome.violations)

        return result

    def run_rule(self, rule: Rule, file: ParsedFile) -> RuleOutcome:
        """Run a single rule, capturing unexpected exceptions as a failed outcome."""
        try:
            violations = list(rule.evaluate(file, self.analyzer))
        except Exception as exc:
            logger.warning("Rule %s failed on %s: %s", rule.id, file.file_path, exc, exc_info=True)
            return RuleOutcome(rule_id=rule.id, error=str(exc) or type(exc).__name__)
        return RuleOutcome(rule_id=rule.id, violations=violations)

    def _build_result(self, file_results: list[FileResult], applicable: dict[str, Rule]) -> ScanResult:
        violations = [v for f in file_results for v in f.violations]

        # A rule counts as passed if it passed in at least one file
        passed_ids = {rule_id for f in file_results for rule_id in f.passed_rules}
        failed_ids = {v.rule_id for v in violations}

        summary = ScanSummary(
            total_files=len(file_results),
            total_violations=len(violations),
            error_count=sum(1 for v in violations if v.severity == Severity.ERROR),
            warning_count=sum(1 for v in violations if v.severity == Severity.WARNING),
            info_count=sum(1 for v in violations if v.severity == Severity.INFO),
            passed_rules=len(passed_ids),
            failed_rules=len(failed_ids),
        )

        levels = {rule_id: _catalog_level(rule_id) for rule_id in applicable}
        breakdown: dict[ComplianceLevel, float] = {}
        for level in ComplianceLevel:
            level_ids = {rule_id for rule_id, lvl in levels.items() if lvl == level}
            breakdown[level] = _percentage(passed_ids & level_ids, level_ids)

        compliance = ComplianceReport(
            level=self.options.level,
            percentage=_percentage(passed_ids & set(applicable), set(applicable)),
            breakdown=breakdown,
        )
        return ScanResult(files=file_results, summary=summary, compliance=compliance)


def _catalog_level(rule_id: str) -> ComplianceLevel | None:
    meta = rule_by_id(rule_id)
    return meta.level if meta is not None else None


def _percentage(passed: set[str], total: set[str]) -> float:
    if not total:
        return 100.0
    return round(len(passed) / len(total) * 100, 2)
