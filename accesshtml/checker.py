"""WCAGChecker: discovery plus compliance engine behind one call."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from accesshtml.config import ScanConfig
from accesshtml.engine import ComplianceEngine
from accesshtml.models import ScanResult
from accesshtml.rules import default_rules
from accesshtml.rules.base import Rule
from accesshtml.scanner import FileScanner

logger = logging.getLogger(__name__)


class NoFilesFoundError(Exception):
    """Raised when discovery finds nothing to scan."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"No files found to scan in {directory}")
        self.directory = directory


class WCAGChecker:
    """Scans a directory for WCAG 2.1 violations with every built-in rule.

    Usage::

        checker = WCAGChecker(ScanConfig(level=ComplianceLevel.AA))
        result = checker.scan(Path("site/"))
    """

    def __init__(self, options: ScanConfig | None = None) -> None:
        options = options or ScanConfig()
        self.scanner = FileScanner(options)
        self.engine = ComplianceEngine(options)
        for rule in default_rules():
            self.engine.register_rule(rule)

    def scan(self, directory: Path) -> ScanResult:
        files = self.scanner.scan_directory(directory)
        if not files:
            raise NoFilesFoundError(directory)

        logger.info("Scanning %d file(s) in %s", len(files), directory)
        return self.engine.analyze_files(files)

    def update_options(self, **changes: Any) -> None:
        self.scanner.update_options(**changes)
        self.engine.update_options(**changes)

    def register_rule(self, rule: Rule) -> None:
        self.engine.register_rule(rule)
