"""Output rendering: JSON node dumps and the text TOC listing."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from mdparse.models import Node, TocItem

# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------


def nodes_to_data(nodes: Iterable[Node]) -> list[dict[str, Any]]:
    return [n.to_dict() for n in nodes]


def render_json(nodes: Iterable[Node], indent: int = 2) -> str:
    """Produce stable JSON for a node sequence (document order)."""
    return json.dumps(nodes_to_data(nodes), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Text TOC output
# ---------------------------------------------------------------------------


def render_toc_text(items: Iterable[TocItem]) -> str:
    """Indented bullet listing, two spaces per level below 1."""
    lines: list[str] = ["Table of Contents:"]
    for item in items:
        indent = "  " * (item.level - 1)
        lines.append(f"{indent}- {item.text}")
    return "\n".join(lines)
