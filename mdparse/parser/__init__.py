"""Block segmenter and inline transformer."""

from mdparse.parser.blocks import BlockSegmenter, segment
from mdparse.parser.inline import InlineTransformer, escape_html, transform_inline

__all__ = [
    "BlockSegmenter",
    "InlineTransformer",
    "escape_html",
    "segment",
    "transform_inline",
]
