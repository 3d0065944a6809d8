"""Tests for mdparse.models."""

from mdparse.models import (
    CodeBlock,
    Header,
    ListBlock,
    ListItem,
    NodeKind,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TableSeparator,
    TocItem,
)


class TestNodeKind:
    def test_str(self):
        assert str(NodeKind.LIST_ITEM) == "list-item"
        assert str(NodeKind.HR) == "hr"

    def test_classes_carry_kind(self):
        assert Paragraph().kind is NodeKind.PARAGRAPH
        assert TableSeparator().kind is NodeKind.TABLE_SEPARATOR


class TestLevels:
    def test_clamped_high(self):
        assert Header(level=9).level == 6

    def test_clamped_low(self):
        assert Header(level=0).level == 1
        assert TocItem(level=-3).level == 1


class TestCodeBlock:
    def test_language(self):
        assert CodeBlock.with_language("py").language == "py"
        assert CodeBlock().language == ""

    def test_append_line(self):
        block = CodeBlock()
        block.append_line("a")
        block.append_line("")
        block.append_line("b")
        assert block.text == "a\n\nb"


class TestTableCell:
    def test_defaults_to_data_cell(self):
        cell = TableCell(text="x")
        assert cell.attributes == {"header": "false"}
        assert cell.header is False

    def test_header_setter(self):
        cell = TableCell()
        cell.header = True
        assert cell.attributes["header"] == "true"


class TestTable:
    def _row(self, *texts):
        return TableRow(children=[TableCell(text=t) for t in texts])

    def test_separator_after_first_row_promotes(self):
        table = Table()
        table.add(self._row("A"))
        table.add(TableSeparator())
        assert table.rows[0].children[0].header is True

    def test_later_separator_does_not_promote(self):
        table = Table()
        table.add(self._row("A"))
        table.add(self._row("B"))
        table.add(TableSeparator())
        assert not any(c.header for r in table.rows for c in r.children)

    def test_rows_skip_separators(self):
        table = Table()
        table.add(TableSeparator())
        table.add(self._row("x"))
        assert len(table.rows) == 1
        assert len(table.children) == 2


class TestToDict:
    def test_header(self):
        assert Header(text="T", level=2).to_dict() == {
            "kind": "header",
            "text": "T",
            "level": 2,
        }

    def test_leaf_without_attributes(self):
        assert Paragraph(text="p").to_dict() == {"kind": "paragraph", "text": "p"}

    def test_list_children(self):
        lst = ListBlock.starting_with(ListItem(text="a"), ordered=True)
        assert lst.ordered is True
        assert lst.to_dict() == {
            "kind": "list",
            "text": "",
            "attributes": {"ordered": "true"},
            "children": [{"kind": "list-item", "text": "a"}],
        }

    def test_children_not_shared(self):
        a = ListBlock()
        b = ListBlock()
        a.children.append(ListItem(text="x"))
        assert b.children == []
