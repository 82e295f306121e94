"""Report generation: JSON, HTML, and Markdown output."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from accesshtml import __version__
from accesshtml.models import FileResult, ScanResult

WCAG_VERSION = "2.1"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _compliance_dict(result: ScanResult) -> dict[str, Any]:
    return {
        "level": result.compliance.level.value,
        "percentage": result.compliance.percentage,
        "breakdown": {level.value: pct for level, pct in result.compliance.breakdown.items()},
    }


def _file_dict(file: FileResult) -> dict[str, Any]:
    return {
        "file_path": file.file_path,
        "violation_count": len(file.violations),
        "passed_rule_count": len(file.passed_rules),
        "skipped_rule_count": len(file.skipped_rules),
        "violations": [asdict(v) for v in file.violations],
        "passed_rules": list(file.passed_rules),
        "skipped_rules": list(file.skipped_rules),
    }


def format_json(result: ScanResult, *, pretty: bool = True) -> str:
    """Render the full scan result, including every violation, as JSON."""
    data = {
        "timestamp": _now(),
        "wcag_version": WCAG_VERSION,
        "compliance_level": result.compliance.level.value,
        "summary": asdict(result.summary),
        "compliance": _compliance_dict(result),
        "files": [_file_dict(f) for f in result.files],
        "metadata": {"generator": "accesshtml", "version": __version__},
    }
    return json.dumps(data, indent=2 if pretty else None, default=str)


def format_json_summary(result: ScanResult) -> str:
    """Render only the summary and compliance blocks as JSON."""
    data = {
        "timestamp": _now(),
        "compliance": _compliance_dict(result),
        "summary": asdict(result.summary),
        "file_count": len(result.files),
        "files_with_violations": sum(1 for f in result.files if f.violations),
    }
    return json.dumps(data, indent=2)


def format_markdown(result: ScanResult) -> str:
    """Render the scan result as a Markdown report."""
    s = result.summary
    lines: list[str] = [
        f"# WCAG {WCAG_VERSION} Compliance Report",
        "",
        f"- **Level:** {result.compliance.level.value}",
        f"- **Compliance:** {result.compliance.percentage}%",
        f"- **Files scanned:** {s.total_files}",
        f"- **Rules passed:** {s.passed_rules}",
        f"- **Rules failed:** {s.failed_rules}",
        "",
        f"## Violations ({s.error_count} errors, {s.warning_count} warnings, {s.info_count} info)",
        "",
    ]

    for file in result.files:
        if not file.violations and not file.skipped_rules:
            continue
        lines.append(f"### {file.file_path}")
        lines.append("")
        for v in file.violations:
            location = f" (line {v.line})" if v.line is not None else ""
            lines.append(f"- **[{v.severity.value.upper()}]** `{v.rule_id}`{location}: {v.message}")
            if v.suggestion:
                lines.append(f"  - Suggestion: {v.suggestion}")
        for rule_id in file.skipped_rules:
            lines.append(f"- **[SKIPPED]** `{rule_id}`: rule failed to run on this file")
        lines.append("")

    return "\n".join(lines)


_TEMPLATES_DIR = Path(__file__).parent / "templates"

# (severity, border color, background color)
_SEVERITY_COLORS = [
    ("error", "#ef4444", "#fef2f2"),
    ("warning", "#f59e0b", "#fffbeb"),
    ("info", "#3b82f6", "#eff6ff"),
]


def _compliance_color(percentage: float) -> str:
    if percentage >= 80:
        return "#10b981"
    if percentage >= 60:
        return "#f59e0b"
    return "#ef4444"


def format_html(result: ScanResult) -> str:
    """Render a standalone HTML report with severity-colored sections."""
    env = Environment(loader=FileSystemLoader(str(_TEMPLATES_DIR)), autoescape=True)
    template = env.get_template("report.html.j2")
    return template.render(
        generated=_now(),
        version=__version__,
        wcag_version=WCAG_VERSION,
        summary=result.summary,
        compliance=result.compliance,
        compliance_color=_compliance_color(result.compliance.percentage),
        severity_colors=_SEVERITY_COLORS,
        files=result.files,
    )


def write_report(result: ScanResult, output: Path, fmt: str) -> None:
    """Write *result* to *output* in the given format (json, html, markdown)."""
    renderers = {
        "json": format_json,
        "html": format_html,
        "markdown": format_markdown,
    }
    try:
        render = renderers[fmt]
    except KeyError:
        raise ValueError(f"Unsupported report format: {fmt!r}") from None
    output.write_text(render(result), encoding="utf-8")
