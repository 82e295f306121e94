"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from accesshtml.config import DEFAULT_EXCLUDE, AccessHTMLConfig, ScanConfig
from accesshtml.models import ComplianceLevel


class TestAccessHTMLConfig:
    def test_defaults(self) -> None:
        cfg = AccessHTMLConfig()
        assert cfg.scan.level == ComplianceLevel.AA
        assert cfg.scan.include == ["**/*.html", "**/*.htm"]
        assert cfg.scan.exclude == DEFAULT_EXCLUDE
        assert cfg.scan.fail_on_error is False
        assert cfg.scan.max_warnings == -1
        assert cfg.output.report_format == "text"
        assert cfg.output.output_file is None

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "accesshtml.yaml"
        config_file.write_text(
            """\
scan:
  level: AAA
  ignore_rules:
    - color-contrast
  exclude:
    - vendor/**
  fail_on_error: true
  max_warnings: 10
output:
  report_format: json
  output_file: reports/a11y.json
""",
            encoding="utf-8",
        )
        cfg = AccessHTMLConfig.load(config_file)
        assert cfg.scan.level == ComplianceLevel.AAA
        assert cfg.scan.ignore_rules == ["color-contrast"]
        assert cfg.scan.exclude == ["vendor/**"]
        assert cfg.scan.fail_on_error is True
        assert cfg.scan.max_warnings == 10
        assert cfg.output.report_format == "json"
        assert cfg.output.output_file == Path("reports/a11y.json")

    def test_partial_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "accesshtml.yaml"
        config_file.write_text("scan:\n  level: A\n", encoding="utf-8")
        cfg = AccessHTMLConfig.load(config_file)
        assert cfg.scan.level == ComplianceLevel.A
        assert cfg.scan.include == ["**/*.html", "**/*.htm"]  # default preserved
        assert cfg.output.report_format == "text"  # default preserved

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "accesshtml.yaml"
        config_file.write_text("", encoding="utf-8")
        assert AccessHTMLConfig.load(config_file) == AccessHTMLConfig()

    def test_discovered_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "accesshtml.yaml").write_text("scan:\n  level: A\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert AccessHTMLConfig.load().scan.level == ComplianceLevel.A

    def test_no_file_returns_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert AccessHTMLConfig.load() == AccessHTMLConfig()

    def test_invalid_level_rejected(self, tmp_path: Path) -> None:
        config_file = tmp_path / "accesshtml.yaml"
        config_file.write_text("scan:\n  level: AAAA\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            AccessHTMLConfig.load(config_file)


class TestScanConfigMerged:
    def test_shallow_merge(self) -> None:
        base = ScanConfig(ignore_rules=["img-alt"])
        merged = base.merged(level="A", rules=["link-name"])
        assert merged.level == ComplianceLevel.A
        assert merged.rules == ["link-name"]
        assert merged.ignore_rules == ["img-alt"]
        assert base.level == ComplianceLevel.AA

    def test_invalid_change_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScanConfig().merged(max_warnings="lots")
