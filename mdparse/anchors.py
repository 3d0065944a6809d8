"""Header anchor slugs."""

from __future__ import annotations

import html
import re

_STRIP_RE = re.compile(r"[^\w\s-]")
_SPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^>]*>")


def slug(text: str) -> str:
    """Return the anchor slug for *text*.

    Lowercase, drop anything that is not a word character, whitespace or
    hyphen, then turn each whitespace run into one hyphen::

        >>> slug("Hello, World!")
        'hello-world'
    """
    cleaned = _STRIP_RE.sub("", text.lower()).strip()
    return _SPACE_RE.sub("-", cleaned)


def plain_text(markup: str) -> str:
    """Drop tags from already-transformed header text and decode entities."""
    return html.unescape(_TAG_RE.sub("", markup))


class AnchorRegistry:
    """Hands out anchors for one document, numbering repeats.

    The first ``Intro`` gets ``intro``, the next ``intro-1``, then
    ``intro-2``.  With *unique* off every call returns the plain slug.
    """

    def __init__(self, unique: bool = True) -> None:
        self.unique = unique
        self._seen: dict[str, int] = {}

    def anchor(self, header_text: str) -> str:
        base = slug(plain_text(header_text))
        if not self.unique:
            return base
        count = self._seen.get(base, 0)
        self._seen[base] = count + 1
        if count == 0:
            return base
        candidate = f"{base}-{count}"
        # "a-1" may itself be a heading earlier in the document.
        while candidate in self._seen:
            count += 1
            candidate = f"{base}-{count}"
        self._seen[base] = count + 1
        self._seen[candidate] = 1
        return candidate
