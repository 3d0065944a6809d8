"""Golden tests: end-to-end against the fixture document.

Fixtures:
  - golden/sample.md    → every block kind, a repeated header
  - golden/sample.html  → expected render with default options
"""

import json
import os

from mdparse import MarkdownParser
from mdparse.output import render_json

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures", "golden")


def _read(name: str) -> str:
    with open(os.path.join(FIXTURES, name), encoding="utf-8") as f:
        return f.read()


parser = MarkdownParser()


class TestSampleDocument:
    def test_html_matches_golden(self):
        nodes = parser.parse(_read("sample.md"))
        assert parser.render(nodes) == _read("sample.html").rstrip("\n")

    def test_node_kinds(self):
        doc = json.loads(render_json(parser.parse(_read("sample.md"))))
        assert [n["kind"] for n in doc] == [
            "header", "paragraph", "header", "code", "list", "list",
            "blockquote", "table", "hr", "header",
        ]

    def test_toc(self):
        toc = parser.table_of_contents(parser.parse(_read("sample.md")))
        assert [(t.text, t.level, t.anchor) for t in toc] == [
            ("Project Title", 1, "project-title"),
            ("Install", 2, "install"),
            ("Install", 2, "install-1"),
        ]

    def test_parse_file_matches_parse(self):
        path = os.path.join(FIXTURES, "sample.md")
        assert parser.parse_file(path) == parser.parse(_read("sample.md"))
