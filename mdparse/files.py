"""File input/output around the parser."""

from __future__ import annotations

import logging
from pathlib import Path

from mdparse.exceptions import SourceDecodeError, SourceNotFoundError

logger = logging.getLogger(__name__)


def read_file(path: str | Path) -> str:
    """Read a UTF-8 markdown file.

    Raises :class:`SourceNotFoundError` when *path* is not an existing file
    and :class:`SourceDecodeError` when its bytes are not valid UTF-8.
    """
    p = Path(path)
    if not p.is_file():
        raise SourceNotFoundError(str(path))
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceDecodeError(str(path), exc.reason) from exc
    logger.debug("Read %d characters from %s", len(text), p)
    return text


def write_file(path: str | Path, text: str) -> Path:
    """Write *text* to *path*, creating parent directories if needed."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), p)
    return p
