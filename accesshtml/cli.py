"""Command line interface for scanning sites and listing rules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from accesshtml import __version__
from accesshtml.models import ComplianceLevel, ScanResult

app = typer.Typer(
    name="accesshtml",
    help="WCAG 2.1 accessibility checker for HTML.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"accesshtml {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Static WCAG 2.1 compliance scanning for HTML sites."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def scan(
    directory: Path = typer.Argument(..., help="Directory containing HTML files to scan."),
    level: Optional[ComplianceLevel] = typer.Option(  # noqa: UP007
        None, "--level", "-l", help="Compliance level (A, AA, AAA).",
    ),
    fmt: Optional[str] = typer.Option(  # noqa: UP007
        None, "--format", "-f", help="Output format: text, json, html, markdown.",
    ),
    output: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--output", "-o", help="Write the report to this file.",
    ),
    fail_on_error: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--fail-on-error/--no-fail-on-error", help="Exit 1 if any error is found.",
    ),
    max_warnings: Optional[int] = typer.Option(  # noqa: UP007
        None, "--max-warnings", help="Exit 1 if warnings exceed this count (negative disables).",
    ),
    include: Optional[List[str]] = typer.Option(  # noqa: UP006, UP007
        None, "--include", help="Glob pattern of files to include (repeatable).",
    ),
    exclude: Optional[List[str]] = typer.Option(  # noqa: UP006, UP007
        None, "--exclude", help="Glob pattern of files to exclude (repeatable).",
    ),
    rule: Optional[List[str]] = typer.Option(  # noqa: UP006, UP007
        None, "--rule", "-r", help="Only run this rule id (repeatable).",
    ),
    ignore_rule: Optional[List[str]] = typer.Option(  # noqa: UP006, UP007
        None, "--ignore-rule", help="Skip this rule id (repeatable).",
    ),
    config: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--config", "-c", help="Path to accesshtml.yaml.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Scan a directory for WCAG compliance issues."""
    _configure_logging(verbose)

    if not directory.is_dir():
        console.print(f"[red]Not a directory:[/red] {directory}")
        raise typer.Exit(code=1)

    from accesshtml.checker import NoFilesFoundError, WCAGChecker
    from accesshtml.config import AccessHTMLConfig

    cfg = AccessHTMLConfig.load(config)

    overrides: dict[str, Any] = {}
    if level is not None:
        overrides["level"] = level
    if fail_on_error is not None:
        overrides["fail_on_error"] = fail_on_error
    if max_warnings is not None:
        overrides["max_warnings"] = max_warnings
    if include:
        overrides["include"] = include
    if exclude:
        overrides["exclude"] = exclude
    if rule:
        overrides["rules"] = rule
    if ignore_rule:
        overrides["ignore_rules"] = ignore_rule
    options = cfg.scan.merged(**overrides)

    report_format = fmt or cfg.output.report_format
    if report_format not in ("text", "json", "html", "markdown"):
        console.print(f"[red]Unknown format:[/red] {report_format}")
        raise typer.Exit(code=1)
    output = output or cfg.output.output_file

    console.print(f"[dim]Scanning {directory} for WCAG {options.level.value} compliance...[/dim]")

    checker = WCAGChecker(options)
    try:
        result = checker.scan(directory)
    except NoFilesFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    if report_format == "text":
        _print_text_results(result)
    else:
        from accesshtml.reporter import format_html, format_json, format_markdown, write_report

        if output is not None:
            write_report(result, output, report_format)
            console.print(f"[green]OK[/green] Report saved to {output}")
        else:
            renderers = {"json": format_json, "html": format_html, "markdown": format_markdown}
            typer.echo(renderers[report_format](result))

    code = exit_code(result, fail_on_error=options.fail_on_error, max_warnings=options.max_warnings)
    if code:
        raise typer.Exit(code=code)


def exit_code(result: ScanResult, *, fail_on_error: bool, max_warnings: int) -> int:
    """Map a scan result to a process exit code."""
    if fail_on_error and result.summary.error_count > 0:
        return 1
    if max_warnings >= 0 and result.summary.warning_count > max_warnings:
        return 1
    return 0


def _print_text_results(result: ScanResult) -> None:
    s = result.summary

    table = Table(title="WCAG Compliance Report")
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("Files scanned", str(s.total_files))
    table.add_row("Total violations", str(s.total_violations))
    table.add_row("Errors", f"[red]{s.error_count}[/red]" if s.error_count else "0")
    table.add_row("Warnings", f"[yellow]{s.warning_count}[/yellow]" if s.warning_count else "0")
    table.add_row("Info", str(s.info_count))
    table.add_row("Compliance", f"{result.compliance.percentage}%")
    console.print(table)

    if not s.total_violations:
        console.print("[green]OK[/green] No violations found!")
        return

    severity_icon = {
        "error": "[red]X[/red]",
        "warning": "[yellow]![/yellow]",
        "info": "[blue]i[/blue]",
    }
    for file in result.files:
        if not file.violations:
            continue
        console.print()
        console.print(f"[underline]{escape(file.file_path)}[/underline]")
        for v in file.violations:
            icon = severity_icon.get(v.severity.value, " ")
            location = f":{v.line}" if v.line is not None else ""
            label = escape(f"[{v.rule_id}]{location}")
            console.print(f"  {icon} {label} {escape(v.message)}", highlight=False)
            if v.element:
                console.print(f"      {v.element}", markup=False, highlight=False)


@app.command()
def rules(
    level: ComplianceLevel = typer.Option(
        ComplianceLevel.AAA, "--level", "-l", help="Show rules up to this level.",
    ),
) -> None:
    """List the built-in rules and their WCAG levels."""
    from accesshtml.rules.catalog import rules_by_level

    table = Table(title=f"WCAG rules (level {level.value})")
    table.add_column("Rule", style="bold", no_wrap=True)
    table.add_column("Level")
    table.add_column("Severity")
    table.add_column("Name")

    for entry in rules_by_level(level):
        table.add_row(entry.id, entry.level.value, entry.severity.value, entry.name)

    console.print(table)
