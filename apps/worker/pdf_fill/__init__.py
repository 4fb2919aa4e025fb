"""
Fill the justification PDF template and assemble batches of filled pages.
"""
from apps.worker.pdf_fill.assembler import assemble_document, count_pages
from apps.worker.pdf_fill.errors import (
    AssemblyCancelledError,
    FontEmbedError,
    InvalidRecordError,
    PdfFillError,
    TemplateLoadError,
)
from apps.worker.pdf_fill.page_render import render_page
from apps.worker.pdf_fill.text_layout import wrap_text

__all__ = [
    "AssemblyCancelledError",
    "FontEmbedError",
    "InvalidRecordError",
    "PdfFillError",
    "TemplateLoadError",
    "assemble_document",
    "count_pages",
    "render_page",
    "wrap_text",
]
