"""Parser facade bundling options with parse, render and TOC operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from mdparse.config import ParseOptions
from mdparse.files import read_file
from mdparse.models import Node, TocItem
from mdparse.parser.blocks import BlockSegmenter
from mdparse.renderer import HtmlRenderer
from mdparse.toc import table_of_contents

logger = logging.getLogger(__name__)


class MarkdownParser:
    """Markdown to node list / HTML converter.

    >>> parser = MarkdownParser(ParseOptions(breaks=True))
    >>> html = parser.render(parser.parse("# Title\\n\\ntext"))
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()

    def parse(self, source: str) -> list[Node]:
        nodes = BlockSegmenter(self.options).segment(source)
        logger.debug("Parsed %d top-level nodes", len(nodes))
        return nodes

    def render(self, nodes: Iterable[Node]) -> str:
        return HtmlRenderer(self.options).render(nodes)

    to_html = render

    def table_of_contents(self, nodes: Iterable[Node]) -> list[TocItem]:
        return table_of_contents(nodes, self.options)

    def parse_file(self, path: str | Path) -> list[Node]:
        """Read and parse *path*; raises ``SourceNotFoundError`` if missing."""
        return self.parse(read_file(path))

    def parse_file_to_html(self, path: str | Path) -> str:
        return self.render(self.parse_file(path))


def parse(source: str, options: ParseOptions | None = None) -> list[Node]:
    """Parse markdown *source* into top-level nodes."""
    return MarkdownParser(options).parse(source)
