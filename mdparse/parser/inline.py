"""Inline transformer: emphasis, code spans, links, images, autolinks.

Each step is one global regex substitution over the output of the
previous step, in a fixed order::

    bold -> italic -> strikethrough -> code -> link -> image
         -> autolink -> sanitize

Markup produced by a step is parked in a per-call :class:`_Stash` and
replaced by an opaque ``\\x02N\\x03`` marker, so later steps and the final
HTML escape only ever see source text.  ``ParseOptions.legacy_sanitize``
switches the stash off: tags are inserted directly and the escape runs
over them too, which turns ``**a**`` into ``&lt;strong&gt;a&lt;&#x2F;strong&gt;``.
In that mode the link step also claims ``![alt](src)``, leaving a literal
``!`` before an anchor where an image was written.
"""

from __future__ import annotations

import re

from mdparse.config import ParseOptions

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
}
_ESCAPE_RE = re.compile(r"[&<>\"'/]")

_STX, _ETX = "\x02", "\x03"
_MARKER_RE = re.compile(r"\x02(\d+)\x03")

_BOLD = (
    (re.compile(r"\*\*(.*?)\*\*"), "**"),
    (re.compile(r"__(.*?)__"), "__"),
)
_ITALIC = (
    (re.compile(r"\*(.*?)\*"), "*"),
    (re.compile(r"_(.*?)_"), "_"),
)
_STRIKE = (re.compile(r"~~(.*?)~~"), "~~")
_CODE = (re.compile(r"`([^`]+)`"), "`")
_LINK_RE = re.compile(r"(?<!!)\[([^\]]+)\]\(([^)]+)\)")
_LEGACY_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_URL_RE = re.compile(r"https?://[^\s\x02\x03]+")
_LEGACY_URL_RE = re.compile(r"https?://[^\s]+")


def escape_html(text: str) -> str:
    """Escape ``& < > " ' /`` to their entity forms."""
    return _ESCAPE_RE.sub(lambda m: _HTML_ENTITIES[m.group(0)], text)


class _Stash:
    """Generated markup kept out of the text until the last step."""

    def __init__(self, passthrough: bool = False) -> None:
        self.passthrough = passthrough
        self._items: list[tuple[str, str]] = []  # (markup, source)

    def add(self, markup: str, source: str = "") -> str:
        if self.passthrough:
            return markup
        self._items.append((markup, source))
        return f"{_STX}{len(self._items) - 1}{_ETX}"

    def restore(self, text: str) -> str:
        if self.passthrough:
            return text
        return _MARKER_RE.sub(lambda m: self._items[int(m.group(1))][0], text)

    def source(self, text: str) -> str:
        """Put the original markdown back in place of each marker."""
        if self.passthrough:
            return text
        return _MARKER_RE.sub(lambda m: self._items[int(m.group(1))][1], text)


class InlineTransformer:
    """Resolve inline markdown inside a single line of text."""

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()

    def transform(self, text: str) -> str:
        opts = self.options
        stash = _Stash(passthrough=opts.legacy_sanitize)
        if not stash.passthrough:
            # Source text must not be able to forge a marker.
            text = text.replace(_STX, "").replace(_ETX, "")

        result = text
        for pattern, marker in _BOLD:
            result = pattern.sub(self._wrap(stash, "strong", marker), result)
        for pattern, marker in _ITALIC:
            result = pattern.sub(self._wrap(stash, "em", marker), result)
        if opts.gfm:
            pattern, marker = _STRIKE
            result = pattern.sub(self._wrap(stash, "del", marker), result)
        pattern, marker = _CODE
        result = pattern.sub(self._wrap(stash, "code", marker), result)

        def link(m: re.Match[str]) -> str:
            href = self._attr(stash, m.group(2))
            return (
                stash.add(f'<a href="{href}">', "[")
                + m.group(1)
                + stash.add("</a>", f"]({stash.source(m.group(2))})")
            )

        def image(m: re.Match[str]) -> str:
            src = self._attr(stash, m.group(2))
            alt = self._attr(stash, m.group(1))
            return stash.add(f'<img src="{src}" alt="{alt}">', stash.source(m.group(0)))

        link_re = _LEGACY_LINK_RE if stash.passthrough else _LINK_RE
        result = link_re.sub(link, result)
        result = _IMAGE_RE.sub(image, result)

        if opts.linkify:
            url_re = _LEGACY_URL_RE if stash.passthrough else _URL_RE

            def autolink(m: re.Match[str]) -> str:
                url = m.group(0)
                href = self._attr(stash, url)
                return (
                    stash.add(f'<a href="{href}" target="_blank">')
                    + url
                    + stash.add("</a>")
                )

            result = url_re.sub(autolink, result)

        if opts.sanitize:
            result = escape_html(result)

        return stash.restore(result)

    def _wrap(self, stash: _Stash, tag: str, marker: str):
        def repl(m: re.Match[str]) -> str:
            return (
                stash.add(f"<{tag}>", marker)
                + m.group(1)
                + stash.add(f"</{tag}>", marker)
            )

        return repl

    def _attr(self, stash: _Stash, value: str) -> str:
        value = stash.source(value)
        if self.options.sanitize and not stash.passthrough:
            return escape_html(value)
        return value


def transform_inline(text: str, options: ParseOptions | None = None) -> str:
    """Apply every inline rule enabled by *options* to *text*."""
    return InlineTransformer(options).transform(text)
