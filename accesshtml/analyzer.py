"""HTML document analyzer.

Turns a ParsedFile into a queryable BeautifulSoup tree and offers the
query, attribute, text and visibility helpers every rule is built on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag
from soupsieve import SelectorSyntaxError

from accesshtml.models import FileType, ParsedFile
from accesshtml.utils.style import parse_inline_style

logger = logging.getLogger(__name__)

_PARSER = "html.parser"


class ParseError(Exception):
    """Raised when a file cannot be turned into a queryable document."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"Failed to parse HTML for {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason


class HTMLAnalyzer:
    """Stateless helper around a parsed HTML document.

    Usage::

        analyzer = HTMLAnalyzer()
        parsed = analyzer.parse(file)
        images = analyzer.query(parsed.document, "img")
    """

    def parse(self, file: ParsedFile) -> ParsedFile:
        """Return a copy of *file* with its document tree attached."""
        if file.type != FileType.HTML:
            raise ParseError(file.file_path, f"not an HTML file (type={file.type.value})")

        try:
            document = BeautifulSoup(file.content, _PARSER)
        except (ParserRejectedMarkup, TypeError) as exc:
            raise ParseError(file.file_path, str(exc)) from exc

        return file.with_document(document)

    def query(self, document: Tag, selector: str) -> list[Tag]:
        """Return nodes matching *selector* in document order.

        An invalid or unsupported selector yields an empty list and a warning.
        """
        try:
            return list(document.select(selector))
        except (SelectorSyntaxError, NotImplementedError, ValueError) as exc:
            logger.warning("Invalid selector %r: %s", selector, exc)
            return []

    def context(self, node: Tag, max_length: int = 100) -> str:
        """Serialized markup of *node*, truncated to *max_length* characters."""
        markup = str(node)
        if len(markup) <= max_length:
            return markup
        return markup[:max_length] + "..."

    def selector(self, node: Tag) -> str:
        """Best-effort display selector: ``tag#id``, ``tag.a.b`` or ``tag``."""
        tag_name = node.name.lower()
        node_id = self.attribute(node, "id")
        if node_id:
            return f"{tag_name}#{node_id}"

        classes = (self.attribute(node, "class") or "").split()
        if classes:
            return f"{tag_name}.{'.'.join(classes[:2])}"

        return tag_name

    def has_attribute(self, node: Tag, name: str) -> bool:
        return node.has_attr(name)

    def attribute(self, node: Tag, name: str) -> str | None:
        value = node.get(name)
        if value is None:
            return None
        # bs4 splits multi-valued attributes such as class and rel
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text_content(self, node: Tag) -> str:
        """Whitespace-collapsed text of *node* and its descendants."""
        return " ".join(node.get_text().split())

    def is_visible(self, node: Tag) -> bool:
        """Structural visibility heuristic.

        Looks only at the node's own inline style, ``hidden`` and
        ``aria-hidden``. Stylesheets and inherited visibility are ignored.
        """
        style = parse_inline_style(self.attribute(node, "style"))
        if style.get("display", "").lower() == "none":
            return False
        if style.get("visibility", "").lower() == "hidden":
            return False
        if self.has_attribute(node, "hidden"):
            return False
        if self.attribute(node, "aria-hidden") == "true":
            return False
        return True

    def line_number(self, node: Tag) -> int | None:
        """Source line recorded by the parser, or None if unknown."""
        return getattr(node, "sourceline", None)

    def column_number(self, node: Tag) -> int | None:
        """1-based source column recorded by the parser, or None if unknown."""
        pos = getattr(node, "sourcepos", None)
        return pos + 1 if pos is not None else None

    def element_by_id(self, document: Tag, element_id: str) -> Tag | None:
        if not element_id:
            return None
        return document.find(id=element_id)

    def labels_for(self, document: Tag, element_id: str) -> list[Tag]:
        """``<label for=...>`` elements pointing at *element_id*."""
        if not element_id:
            return []
        return list(document.find_all("label", attrs={"for": element_id}))

    def ancestors(self, node: Tag) -> Iterator[Tag]:
        """Parent elements from nearest to outermost, excluding the document."""
        for parent in node.parents:
            if isinstance(parent, BeautifulSoup):
                return
            yield parent
