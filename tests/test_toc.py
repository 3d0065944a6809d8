"""Tests for anchor slugs and table-of-contents extraction."""

import pytest

from mdparse import parse, render, slug, table_of_contents
from mdparse.anchors import AnchorRegistry, plain_text
from mdparse.config import ParseOptions
from mdparse.models import NodeKind, TocItem


class TestSlug:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello, World!", "hello-world"),
            ("  Spaced   out  ", "spaced-out"),
            ("Already-hyphenated Words", "already-hyphenated-words"),
            ("C++ & Rust", "c-rust"),
            ("snake_case stays", "snake_case-stays"),
            ("", ""),
        ],
    )
    def test_slug(self, text, expected):
        assert slug(text) == expected

    def test_plain_text_strips_tags_and_entities(self):
        assert plain_text("Some <strong>bold</strong> &amp; more") == "Some bold & more"


class TestAnchorRegistry:
    def test_repeats_are_numbered(self):
        reg = AnchorRegistry()
        assert [reg.anchor("Intro") for _ in range(3)] == ["intro", "intro-1", "intro-2"]

    def test_skips_suffix_taken_by_earlier_header(self):
        reg = AnchorRegistry()
        assert [reg.anchor(t) for t in ("a-1", "a", "a")] == ["a-1", "a", "a-2"]

    def test_not_unique(self):
        reg = AnchorRegistry(unique=False)
        assert [reg.anchor("Intro") for _ in range(2)] == ["intro", "intro"]


class TestTableOfContents:
    def test_headers_only(self):
        nodes = parse("# A\ntext\n## B\n- item\n### B")
        toc = table_of_contents(nodes)
        assert all(isinstance(item, TocItem) for item in toc)
        assert all(item.kind is NodeKind.TOC_ITEM for item in toc)
        assert [(t.text, t.level, t.anchor) for t in toc] == [
            ("A", 1, "a"),
            ("B", 2, "b"),
            ("B", 3, "b-1"),
        ]

    def test_no_headers(self):
        assert table_of_contents(parse("just text")) == []

    def test_anchors_match_rendered_ids(self):
        nodes = parse("# Intro\n## Usage\n# Intro\n## Hello, World!")
        out = render(nodes)
        for item in table_of_contents(nodes):
            assert f'id="{item.anchor}"' in out

    def test_plain_slugs_when_not_unique(self):
        opts = ParseOptions(unique_anchors=False)
        toc = table_of_contents(parse("# X\n# X", opts), opts)
        assert [t.anchor for t in toc] == ["x", "x"]

    def test_toc_item_serializes_level_and_anchor(self):
        (item,) = table_of_contents(parse("## Setup"))
        assert item.to_dict() == {
            "kind": "toc-item",
            "text": "Setup",
            "attributes": {"anchor": "setup"},
            "level": 2,
        }
