"""
Compose one output PDF from many rendered justification pages.
"""
from __future__ import annotations

import io
import logging
import threading
from datetime import date
from typing import Callable, Sequence

from pypdf import PdfReader, PdfWriter

from apps.worker.pdf_fill.errors import AssemblyCancelledError, PdfFillError
from apps.worker.pdf_fill.page_render import render_page
from packages.shared.models import Record, SignerInfo

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def count_pages(pdf_bytes: bytes) -> int:
    return len(PdfReader(io.BytesIO(pdf_bytes)).pages)


def assemble_document(
    records: Sequence[Record],
    template_bytes: bytes,
    signer: SignerInfo | None = None,
    *,
    today: date | None = None,
    stop_event: threading.Event | None = None,
    on_progress: ProgressCallback | None = None,
) -> bytes:
    """
    Render every record in order and return a single multi-page PDF.

    Fails fast: the first record that cannot be rendered aborts the batch and
    its error is re-raised with ``record_index`` set. ``stop_event`` is checked
    between records only.
    """
    today = today or date.today()
    total = len(records)
    writer = PdfWriter()

    for index, record in enumerate(records):
        if stop_event is not None and stop_event.is_set():
            logger.info(f"Assembly cancelled before record {index} of {total}")
            raise AssemblyCancelledError("Assembly cancelled", record_index=index)
        try:
            page_bytes = render_page(record, template_bytes, signer, today=today)
        except PdfFillError as exc:
            exc.record_index = index
            logger.error(f"Assembly aborted at record {index}: {exc.message}")
            raise
        rendered = PdfReader(io.BytesIO(page_bytes))
        writer.add_page(rendered.pages[0])
        del rendered
        if on_progress is not None:
            on_progress(index + 1, total)

    out = io.BytesIO()
    writer.write(out)
    logger.info(f"Assembled {total} justification page(s)")
    return out.getvalue()
