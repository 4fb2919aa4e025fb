"""
Fill one copy of the justification template.

The text is drawn on a reportlab overlay the size of the template page and
merged onto a freshly loaded copy of the template with pypdf.
"""
from __future__ import annotations

import io
import logging
from datetime import date

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PyPdfError
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from apps.worker.pdf_fill.constants import FONT_NAME, FONT_PATH, FONT_SIZE
from apps.worker.pdf_fill.errors import FontEmbedError, TemplateLoadError
from apps.worker.pdf_fill.page_layout import PlacedText, layout_page, validate_record
from packages.shared.models import Record, SignerInfo

logger = logging.getLogger(__name__)


def resolve_font(font_name: str | None = None, font_path: str | None = None) -> str:
    """Return a reportlab font name usable for drawing and measuring."""
    font_name = font_name or FONT_NAME
    font_path = font_path or FONT_PATH
    if font_path:
        try:
            pdfmetrics.registerFont(TTFont(font_name, font_path))
        except (TTFError, OSError) as exc:
            raise FontEmbedError(f"Could not embed font {font_name} from {font_path}: {exc}") from exc
        return font_name
    try:
        pdfmetrics.getFont(font_name)
    except KeyError as exc:
        raise FontEmbedError(f"Unknown font: {font_name}") from exc
    return font_name


def load_template_page(template_bytes: bytes) -> PageObject:
    try:
        reader = PdfReader(io.BytesIO(template_bytes))
        page_count = len(reader.pages)
        if page_count == 0:
            raise TemplateLoadError("Template has no pages")
        page = reader.pages[0]
    except TemplateLoadError:
        raise
    except (PyPdfError, ValueError, KeyError, OSError) as exc:
        raise TemplateLoadError(f"Template is not a readable PDF: {exc}") from exc
    if page_count > 1:
        logger.warning(f"Template has {page_count} pages; only the first is used")
    return page


def _draw_overlay(placed: list[PlacedText], page_size: tuple[float, float], font_name: str, font_size: float) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=page_size, invariant=1)
    c.setFont(font_name, font_size)
    for item in placed:
        c.drawString(item.x, item.y, item.text)
    c.save()
    return buf.getvalue()


def render_page(
    record: Record,
    template_bytes: bytes,
    signer: SignerInfo | None = None,
    *,
    today: date | None = None,
    font_size: float | None = None,
) -> bytes:
    """
    Draw ``record`` (and the optional signer block) onto a copy of the template.

    Raises InvalidRecordError, TemplateLoadError or FontEmbedError; no partial
    page is ever returned.
    """
    validate_record(record)
    page = load_template_page(template_bytes)
    font_name = resolve_font()
    size = font_size or FONT_SIZE

    width = float(page.mediabox.width)
    height = float(page.mediabox.height)

    def measure(text: str, fs: float) -> float:
        return pdfmetrics.stringWidth(text, font_name, fs)

    placed = layout_page(record, width, measure, signer=signer, today=today, font_size=size)
    overlay = PdfReader(io.BytesIO(_draw_overlay(placed, (width, height), font_name, size)))
    page.merge_page(overlay.pages[0])

    writer = PdfWriter()
    writer.add_page(page)
    out = io.BytesIO()
    writer.write(out)
    logger.debug(f"Rendered page for prontuario {record.medical_record} ({len(placed)} strings)")
    return out.getvalue()
