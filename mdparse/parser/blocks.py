"""Block segmenter: turns markdown source into a flat list of nodes.

The source is read one physical line at a time.  At most one block is
*open* (still accumulating lines); every rule either extends it, closes
it, or replaces it.  Rules are tried in this order and the first match
wins:

1. code fence (```` ``` ````)   6. blockquote (``>``)
2. line inside a code block     7. table row (GFM only)
3. header (``#``)               8. blank line
4. horizontal rule              9. paragraph
5. list item
"""

from __future__ import annotations

import re

from mdparse.config import ParseOptions
from mdparse.models import (
    Blockquote,
    CodeBlock,
    Header,
    HorizontalRule,
    ListBlock,
    ListItem,
    Node,
    OpenBlock,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TableSeparator,
)
from mdparse.parser.inline import InlineTransformer

FENCE = "```"

_LINE_END_RE = re.compile(r"\r?\n")
_HR_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
_LIST_ITEM_RE = re.compile(r"^(?:[-*+]|(\d+)\.)\s")
_LIST_MARKER_RE = re.compile(r"^(?:[-*+]|\d+\.)\s+")
_SEPARATOR_CELL_RE = re.compile(r"^:?-+:?$")


class _State:
    """Output list plus the single open block."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.open: OpenBlock | None = None

    def close(self) -> None:
        if self.open is not None:
            self.nodes.append(self.open)
            self.open = None

    def start(self, block: OpenBlock) -> None:
        self.close()
        self.open = block

    def emit(self, node: Node) -> None:
        """Close the open block and append a standalone *node*."""
        self.close()
        self.nodes.append(node)


class BlockSegmenter:
    """Line-based block parser; inline rules are applied per line."""

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()
        self.inline = InlineTransformer(self.options)

    def segment(self, source: str) -> list[Node]:
        state = _State()
        lines = _LINE_END_RE.split(source)
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            self._feed(state, line)
        # An unterminated fence keeps the rest of the document as code.
        state.close()
        return state.nodes

    # ------------------------------------------------------------------

    def _feed(self, state: _State, line: str) -> None:
        stripped = line.strip()
        current = state.open

        if stripped.startswith(FENCE):
            if isinstance(current, CodeBlock):
                state.close()
            else:
                state.start(CodeBlock.with_language(stripped[len(FENCE):].strip()))
            return

        if isinstance(current, CodeBlock):
            current.append_line(line)
            return

        if stripped.startswith("#"):
            content = stripped.lstrip("#")
            state.emit(
                Header(
                    text=self.inline.transform(content.strip()),
                    level=len(stripped) - len(content),
                )
            )
            return

        if _HR_RE.match(stripped):
            state.emit(HorizontalRule())
            return

        match = _LIST_ITEM_RE.match(stripped)
        if match:
            content = _LIST_MARKER_RE.sub("", stripped, count=1).strip()
            item = ListItem(text=self.inline.transform(content))
            if isinstance(current, ListBlock):
                current.children.append(item)
            else:
                state.start(ListBlock.starting_with(item, ordered=match.group(1) is not None))
            return

        if stripped.startswith(">"):
            content = self.inline.transform(stripped[1:].strip())
            if isinstance(current, Blockquote):
                current.text += "\n" + content
            else:
                state.start(Blockquote(text=content))
            return

        if self.options.gfm and "|" in stripped and len(stripped) > 1:
            row = self._table_row(stripped)
            if isinstance(current, Table):
                current.add(row)
            else:
                table = Table()
                table.add(row)
                state.start(table)
            return

        if not stripped:
            state.close()
            return

        content = self.inline.transform(line)
        if isinstance(current, Paragraph):
            joiner = "<br>\n" if self.options.breaks else "\n"
            current.text += joiner + content
        else:
            state.start(Paragraph(text=content))

    def _table_row(self, stripped: str) -> TableRow | TableSeparator:
        # Outer segments are whatever sits before the first and after the
        # last pipe; they are dropped even when not empty.
        cells = [cell.strip() for cell in stripped.split("|")[1:-1]]
        if all(_SEPARATOR_CELL_RE.match(cell) for cell in cells):
            return TableSeparator()
        return TableRow(
            children=[TableCell(text=self.inline.transform(cell)) for cell in cells]
        )


def segment(source: str, options: ParseOptions | None = None) -> list[Node]:
    """Split *source* into top-level document nodes."""
    return BlockSegmenter(options).segment(source)
