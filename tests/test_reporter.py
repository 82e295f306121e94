"""Tests for report generation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from accesshtml.models import (
    ComplianceLevel,
    ComplianceReport,
    FileResult,
    ScanResult,
    ScanSummary,
    Severity,
    Violation,
)
from accesshtml.reporter import (
    format_html,
    format_json,
    format_json_summary,
    format_markdown,
    write_report,
)


@pytest.fixture
def failing_result() -> ScanResult:
    violation = Violation(
        rule_id="img-alt",
        severity=Severity.ERROR,
        message="Image must have an alt attribute or be marked as decorative",
        element='<img src="<evil>.jpg">',
        selector="img",
        line=12,
        column=5,
        suggestion='Add alt="Description of hero.jpg"',
    )
    warning = Violation(
        rule_id="link-name",
        severity=Severity.WARNING,
        message="Link text is not descriptive enough",
        selector="a",
        line=20,
        column=3,
    )
    return ScanResult(
        files=[
            FileResult(
                file_path="/site/index.html",
                violations=[violation, warning],
                passed_rules=["form-label"],
                skipped_rules=["aria-valid"],
            ),
            FileResult(file_path="/site/about.html", passed_rules=["img-alt", "link-name"]),
        ],
        summary=ScanSummary(
            total_files=2,
            total_violations=2,
            error_count=1,
            warning_count=1,
            passed_rules=3,
            failed_rules=2,
        ),
        compliance=ComplianceReport(
            level=ComplianceLevel.AA,
            percentage=75.0,
            breakdown={ComplianceLevel.A: 75.0, ComplianceLevel.AA: 100.0, ComplianceLevel.AAA: 100.0},
        ),
    )


class TestJsonReport:
    def test_structure(self, failing_result: ScanResult) -> None:
        data = json.loads(format_json(failing_result))
        assert data["wcag_version"] == "2.1"
        assert data["compliance_level"] == "AA"
        assert data["summary"]["total_violations"] == 2
        assert data["compliance"]["percentage"] == 75.0
        assert data["compliance"]["breakdown"] == {"A": 75.0, "AA": 100.0, "AAA": 100.0}
        assert data["metadata"]["generator"] == "accesshtml"
        assert "timestamp" in data

    def test_file_detail(self, failing_result: ScanResult) -> None:
        data = json.loads(format_json(failing_result))
        first = data["files"][0]
        assert first["file_path"] == "/site/index.html"
        assert first["violation_count"] == 2
        assert first["passed_rule_count"] == 1
        assert first["skipped_rules"] == ["aria-valid"]
        violation = first["violations"][0]
        assert violation["rule_id"] == "img-alt"
        assert violation["severity"] == "error"
        assert violation["line"] == 12
        assert "context" not in violation

    def test_compact_output(self, failing_result: ScanResult) -> None:
        assert "\n" not in format_json(failing_result, pretty=False)

    def test_summary_only(self, failing_result: ScanResult) -> None:
        data = json.loads(format_json_summary(failing_result))
        assert data["file_count"] == 2
        assert data["files_with_violations"] == 1
        assert data["summary"]["error_count"] == 1
        assert "files" not in data


class TestHtmlReport:
    def test_escapes_markup(self, failing_result: ScanResult) -> None:
        html = format_html(failing_result)
        assert "&lt;evil&gt;" in html
        assert "<evil>" not in html

    def test_severity_sections(self, failing_result: ScanResult) -> None:
        html = format_html(failing_result)
        assert 'class="violation error"' in html
        assert 'class="violation warning"' in html
        assert "/site/index.html" in html
        assert "/site/about.html" not in html
        assert "75.0%" in html

    def test_clean_result(self) -> None:
        html = format_html(ScanResult())
        assert "No accessibility violations found" in html
        assert html.startswith("<!DOCTYPE html>")

    def test_autoescapes_messages(self) -> None:
        violation = Violation(
            rule_id="aria-valid",
            severity=Severity.ERROR,
            message="Invalid role \"<script>alert(1)</script>\"",
            suggestion="Use \"button\" & friends",
        )
        result = ScanResult(
            files=[FileResult(file_path="/site/x.html", violations=[violation])],
            summary=ScanSummary(total_files=1, total_violations=1, error_count=1),
        )
        html = format_html(result)
        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "&amp; friends" in html


class TestMarkdownReport:
    def test_content(self, failing_result: ScanResult) -> None:
        md = format_markdown(failing_result)
        assert md.startswith("# WCAG 2.1 Compliance Report")
        assert "**Compliance:** 75.0%" in md
        assert "### /site/index.html" in md
        assert "**[ERROR]** `img-alt` (line 12)" in md
        assert "**[SKIPPED]** `aria-valid`" in md
        assert "/site/about.html" not in md


class TestWriteReport:
    @pytest.mark.parametrize("fmt, marker", [
        ("json", '"wcag_version"'),
        ("html", "<!DOCTYPE html>"),
        ("markdown", "# WCAG 2.1 Compliance Report"),
    ])
    def test_formats(self, failing_result: ScanResult, tmp_path: Path, fmt: str, marker: str) -> None:
        output = tmp_path / f"report.{fmt}"
        write_report(failing_result, output, fmt)
        assert marker in output.read_text(encoding="utf-8")

    def test_unknown_format(self, failing_result: ScanResult, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unsupported report format"):
            write_report(failing_result, tmp_path / "report.txt", "pdf")
