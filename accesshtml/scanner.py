"""File discovery: turns a directory into ParsedFile records."""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import Any

from accesshtml.config import ScanConfig
from accesshtml.models import FileType, ParsedFile

logger = logging.getLogger(__name__)

_EXTENSION_TYPES = {
    ".html": FileType.HTML,
    ".htm": FileType.HTML,
    ".css": FileType.CSS,
    ".js": FileType.JS,
    ".jsx": FileType.JSX,
    ".ts": FileType.TS,
    ".tsx": FileType.TSX,
}


def file_type_for(path: Path) -> FileType | None:
    """Map a file extension to its FileType, or None if unsupported."""
    return _EXTENSION_TYPES.get(path.suffix.lower())


class FileScanner:
    """Finds files matching include/exclude glob patterns and reads them."""

    def __init__(self, options: ScanConfig | None = None) -> None:
        self.options = options or ScanConfig()

    def update_options(self, **changes: Any) -> None:
        self.options = self.options.merged(**changes)

    def scan_directory(self, directory: Path) -> list[ParsedFile]:
        """Read every matching file under *directory*, sorted by path."""
        root = Path(directory).resolve()
        files: list[ParsedFile] = []
        for path in self.find_files(root):
            parsed = self._read_file(path)
            if parsed is not None:
                files.append(parsed)
        return files

    def find_files(self, root: Path) -> list[Path]:
        found: set[Path] = set()
        for pattern in self.options.include:
            for path in root.glob(pattern):
                if not path.is_file():
                    continue
                rel = path.relative_to(root).as_posix()
                if any(fnmatch.fnmatch(rel, ex) for ex in self.options.exclude):
                    continue
                found.add(path)
        return sorted(found)

    def _read_file(self, path: Path) -> ParsedFile | None:
        file_type = file_type_for(path)
        if file_type is None:
            return None
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read file %s: %s", path, exc)
            return None
        return ParsedFile(file_path=str(path), content=content, type=file_type)
