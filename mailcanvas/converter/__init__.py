"""Document <-> markup conversion."""

from mailcanvas.common.utils.text import sanitize_text
from mailcanvas.converter.page import wrap_page
from mailcanvas.converter.parser import (
    DocumentSource,
    EncodedSource,
    MarkupSource,
    StructuredSource,
    classify,
    markup_to_document,
    parse,
    render_source,
)
from mailcanvas.converter.render import render, render_block, render_email, to_structure

__all__ = [
    "DocumentSource",
    "EncodedSource",
    "MarkupSource",
    "StructuredSource",
    "classify",
    "markup_to_document",
    "parse",
    "render",
    "render_block",
    "render_email",
    "render_source",
    "sanitize_text",
    "to_structure",
    "wrap_page",
]
