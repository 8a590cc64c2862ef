"""Rendering of content units into PDF pages."""

from .document import DocumentBuilder, build_document, register_font
from .layout import wrap_line, wrap_text
from .viewer import open_pdf

__all__ = [
    "DocumentBuilder",
    "build_document",
    "register_font",
    "wrap_line",
    "wrap_text",
    "open_pdf",
]
