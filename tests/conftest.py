"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from accesshtml.analyzer import HTMLAnalyzer
from accesshtml.models import FileType, ParsedFile
from tests.fixtures.generate import generate_all
from tests.utils.helpers import ParseHTML


@pytest.fixture
def analyzer() -> HTMLAnalyzer:
    return HTMLAnalyzer()


@pytest.fixture
def parse_html(analyzer: HTMLAnalyzer) -> ParseHTML:
    """Return a helper that parses a markup string into a ParsedFile."""

    def _parse(content: str, file_path: str = "/test/index.html") -> ParsedFile:
        file = ParsedFile(file_path=file_path, content=content, type=FileType.HTML)
        return analyzer.parse(file)

    return _parse


@pytest.fixture
def page(parse_html: ParseHTML) -> ParseHTML:
    """Like parse_html, but wraps a body fragment in a full document."""

    def _page(body: str, file_path: str = "/test/index.html") -> ParsedFile:
        return parse_html(f"<html><body>{body}</body></html>", file_path)

    return _page


@pytest.fixture(scope="session")
def corpus_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Generate the synthetic test site and return its root directory."""
    root = tmp_path_factory.mktemp("corpus")
    generate_all(root)
    return root
