"""HTML rendering of parsed nodes."""

from __future__ import annotations

from collections.abc import Iterable

from mdparse.anchors import AnchorRegistry
from mdparse.config import ParseOptions
from mdparse.models import (
    Blockquote,
    CodeBlock,
    Header,
    HorizontalRule,
    ListBlock,
    ListItem,
    Node,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TableSeparator,
)
from mdparse.parser.inline import escape_html


def _visible(nodes: Iterable[Node]) -> list[Node]:
    """Separator rows only mark the header boundary; they produce no HTML."""
    return [n for n in nodes if not isinstance(n, TableSeparator)]


class HtmlRenderer:
    """Map nodes to HTML, recursing into list and table children."""

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()

    def render(self, nodes: Iterable[Node]) -> str:
        """Render top-level *nodes*, one per line.

        Header ids come from a registry scoped to this call, so repeated
        headers get ``-1``, ``-2`` suffixes (unless ``unique_anchors`` is off).
        """
        anchors = AnchorRegistry(unique=self.options.unique_anchors)
        return "\n".join(self._node(n, anchors) for n in _visible(nodes))

    def _node(self, node: Node, anchors: AnchorRegistry) -> str:
        if isinstance(node, Header):
            anchor = anchors.anchor(node.text)
            return f'<h{node.level} id="{anchor}">{node.text}</h{node.level}>'
        if isinstance(node, Paragraph):
            return f"<p>{node.text}</p>"
        if isinstance(node, CodeBlock):
            return (
                f'<pre><code class="language-{node.language}">'
                f"{escape_html(node.text)}</code></pre>"
            )
        if isinstance(node, Blockquote):
            return f"<blockquote>{node.text}</blockquote>"
        if isinstance(node, HorizontalRule):
            return "<hr>"
        if isinstance(node, ListBlock):
            tag = "ol" if node.ordered else "ul"
            items = "\n".join(self._node(c, anchors) for c in node.children)
            return f"<{tag}>\n{items}\n</{tag}>"
        if isinstance(node, ListItem):
            return f"<li>{node.text}</li>"
        if isinstance(node, Table):
            rows = "\n".join(self._node(c, anchors) for c in _visible(node.children))
            return f"<table>\n{rows}\n</table>"
        if isinstance(node, TableRow):
            cells = "".join(self._node(c, anchors) for c in node.children)
            return f"<tr>{cells}</tr>"
        if isinstance(node, TableCell):
            tag = "th" if node.header else "td"
            return f"<{tag}>{node.text}</{tag}>"
        if isinstance(node, TableSeparator):
            return ""
        # toc-item and anything unrecognised
        return node.text


def render(nodes: Iterable[Node], options: ParseOptions | None = None) -> str:
    """Render *nodes* to a single HTML string."""
    return HtmlRenderer(options).render(nodes)
