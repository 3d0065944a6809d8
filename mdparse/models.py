"""Document node models produced by the parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

MAX_HEADER_LEVEL = 6

# ---------------------------------------------------------------------------
# Node kind
# ---------------------------------------------------------------------------


class NodeKind(str, enum.Enum):
    """Closed set of node tags (values are the serialized form)."""

    HEADER = "header"
    PARAGRAPH = "paragraph"
    CODE = "code"
    BLOCKQUOTE = "blockquote"
    HR = "hr"
    LIST = "list"
    LIST_ITEM = "list-item"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    TABLE_SEPARATOR = "table-separator"
    TOC_ITEM = "toc-item"

    def __str__(self) -> str:
        return self.value


def clamp_level(level: int) -> int:
    return max(1, min(int(level), MAX_HEADER_LEVEL))


def _flag(value: bool) -> str:
    return "true" if value else "false"


# ---------------------------------------------------------------------------
# Base node
# ---------------------------------------------------------------------------


@dataclass
class Node:
    """A unit of parsed document structure.

    ``text`` holds inline-transformed content, except for code blocks where
    it is the raw source (escaped only at render time).
    """

    kind: ClassVar[NodeKind]

    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"kind": str(self.kind), "text": self.text}
        if self.attributes:
            doc["attributes"] = dict(self.attributes)
        return doc


# ---------------------------------------------------------------------------
# Leaf nodes
# ---------------------------------------------------------------------------


@dataclass
class Header(Node):
    kind: ClassVar[NodeKind] = NodeKind.HEADER

    level: int = 1

    def __post_init__(self) -> None:
        self.level = clamp_level(self.level)

    def to_dict(self) -> dict[str, Any]:
        doc = super().to_dict()
        doc["level"] = self.level
        return doc


@dataclass
class Paragraph(Node):
    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH


@dataclass
class CodeBlock(Node):
    kind: ClassVar[NodeKind] = NodeKind.CODE

    @classmethod
    def with_language(cls, language: str) -> CodeBlock:
        return cls(attributes={"language": language})

    @property
    def language(self) -> str:
        return self.attributes.get("language", "")

    def append_line(self, line: str) -> None:
        self.text = f"{self.text}\n{line}" if self.text else line


@dataclass
class Blockquote(Node):
    kind: ClassVar[NodeKind] = NodeKind.BLOCKQUOTE


@dataclass
class HorizontalRule(Node):
    kind: ClassVar[NodeKind] = NodeKind.HR


@dataclass
class ListItem(Node):
    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM


@dataclass
class TableCell(Node):
    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL

    def __post_init__(self) -> None:
        self.attributes.setdefault("header", "false")

    @property
    def header(self) -> bool:
        return self.attributes.get("header") == "true"

    @header.setter
    def header(self, value: bool) -> None:
        self.attributes["header"] = _flag(value)


@dataclass
class TableSeparator(Node):
    """Placeholder for a ``| --- | :-: |`` row; never rendered."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_SEPARATOR


@dataclass
class TocItem(Node):
    kind: ClassVar[NodeKind] = NodeKind.TOC_ITEM

    level: int = 1

    def __post_init__(self) -> None:
        self.level = clamp_level(self.level)

    @property
    def anchor(self) -> str:
        return self.attributes.get("anchor", "")

    def to_dict(self) -> dict[str, Any]:
        doc = super().to_dict()
        doc["level"] = self.level
        return doc


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


@dataclass
class _Container(Node):
    children: list[Node] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        doc = super().to_dict()
        doc["children"] = [c.to_dict() for c in self.children]
        return doc


@dataclass
class ListBlock(_Container):
    kind: ClassVar[NodeKind] = NodeKind.LIST

    children: list[ListItem] = field(default_factory=list)

    @classmethod
    def starting_with(cls, item: ListItem, ordered: bool) -> ListBlock:
        return cls(children=[item], attributes={"ordered": _flag(ordered)})

    @property
    def ordered(self) -> bool:
        return self.attributes.get("ordered") == "true"


@dataclass
class TableRow(_Container):
    kind: ClassVar[NodeKind] = NodeKind.TABLE_ROW

    children: list[TableCell] = field(default_factory=list)


@dataclass
class Table(_Container):
    kind: ClassVar[NodeKind] = NodeKind.TABLE

    children: list[Union[TableRow, TableSeparator]] = field(default_factory=list)

    @property
    def rows(self) -> list[TableRow]:
        return [c for c in self.children if isinstance(c, TableRow)]

    def add(self, row: TableRow | TableSeparator) -> None:
        """Append *row*, promoting the first row to header cells when the
        separator directly follows it."""
        if isinstance(row, TableSeparator) and len(self.children) == 1:
            first = self.children[0]
            if isinstance(first, TableRow):
                for cell in first.children:
                    cell.header = True
        self.children.append(row)


# Blocks that can be the segmenter's single open block.
OpenBlock = Union[Paragraph, CodeBlock, ListBlock, Blockquote, Table]
