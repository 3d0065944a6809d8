"""mdparse: single-pass markdown to node list and HTML converter."""

__version__ = "0.1.0"

from mdparse.anchors import slug
from mdparse.config import ParseOptions
from mdparse.core import MarkdownParser, parse
from mdparse.exceptions import (
    ConfigError,
    MdparseError,
    SourceDecodeError,
    SourceNotFoundError,
)
from mdparse.models import Node, NodeKind
from mdparse.renderer import render
from mdparse.toc import table_of_contents

__all__ = [
    "ConfigError",
    "MarkdownParser",
    "MdparseError",
    "Node",
    "NodeKind",
    "ParseOptions",
    "SourceDecodeError",
    "SourceNotFoundError",
    "__version__",
    "parse",
    "render",
    "slug",
    "table_of_contents",
]
