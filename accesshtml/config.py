"""Pydantic configuration model with YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from accesshtml.models import ComplianceLevel

_DEFAULT_CONFIG_NAME = "accesshtml.yaml"

DEFAULT_INCLUDE = ["**/*.html", "**/*.htm"]
DEFAULT_EXCLUDE = ["node_modules/**", "dist/**", "build/**", ".git/**"]


class ScanConfig(BaseModel):
    """Scan settings.

    The engine reads ``level``, ``rules`` and ``ignore_rules``; discovery reads
    ``include`` and ``exclude``; ``fail_on_error`` and ``max_warnings`` only
    drive the command line exit code.
    """

    level: ComplianceLevel = ComplianceLevel.AA
    rules: list[str] = Field(default_factory=list)
    ignore_rules: list[str] = Field(default_factory=list)
    include: list[str] = Field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    fail_on_error: bool = False
    max_warnings: int = -1  # negative disables the warning budget

    def merged(self, **changes: Any) -> ScanConfig:
        """Return a validated copy with *changes* shallow-merged in."""
        return type(self).model_validate({**self.model_dump(), **changes})


class OutputConfig(BaseModel):
    """Report output settings."""

    report_format: Literal["text", "json", "html", "markdown"] = "text"
    output_file: Path | None = None


class AccessHTMLConfig(BaseModel):
    """Top-level configuration for AccessHTML."""

    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> AccessHTMLConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./accesshtml.yaml
          2. ~/.config/accesshtml/accesshtml.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "accesshtml" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> AccessHTMLConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
