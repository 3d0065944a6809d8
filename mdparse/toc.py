"""Table-of-contents extraction from parsed header nodes."""

from __future__ import annotations

from collections.abc import Iterable

from mdparse.anchors import AnchorRegistry
from mdparse.config import ParseOptions
from mdparse.models import Header, Node, TocItem


def table_of_contents(
    nodes: Iterable[Node],
    options: ParseOptions | None = None,
) -> list[TocItem]:
    """Return one ``toc-item`` per top-level header, in document order.

    Anchors are recomputed here with the same registry rules the renderer
    uses, so they match the rendered ``id`` attributes.
    """
    options = options or ParseOptions()
    anchors = AnchorRegistry(unique=options.unique_anchors)
    return [
        TocItem(
            text=node.text,
            level=node.level,
            attributes={"anchor": anchors.anchor(node.text)},
        )
        for node in nodes
        if isinstance(node, Header)
    ]
