"""
API route: Template upload and printable PDFs
"""
from __future__ import annotations

import logging
import os

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from apps.worker.pdf_fill import (
    InvalidRecordError,
    PdfFillError,
    TemplateLoadError,
    assemble_document,
    count_pages,
    render_page,
)
from apps.worker.pdf_fill.page_render import load_template_page
from packages.db.database import get_db
from packages.shared import record_store, storage

router = APIRouter(tags=["prints"])
logger = logging.getLogger(__name__)
MAX_TEMPLATE_BYTES = int(os.getenv("MAX_TEMPLATE_BYTES", str(10 * 1024 * 1024)))


class TemplateResponse(BaseModel):
    sha256: str
    bytes: int
    pages: int


def _template_bytes() -> bytes:
    try:
        return storage.load_template_bytes()
    except FileNotFoundError:
        raise HTTPException(status_code=503, detail="PDF template is not configured")


def _error_response(exc: PdfFillError) -> JSONResponse:
    status = 422 if isinstance(exc, InvalidRecordError) else 500
    logger.warning(f"Print failed: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status,
        content={
            "detail": exc.message,
            "error": type(exc).__name__,
            "record_index": exc.record_index,
            "field": exc.field,
        },
    )


def _pdf(data: bytes, filename: str) -> Response:
    return Response(
        content=data,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{filename}"'},
    )


@router.put("/template", response_model=TemplateResponse, status_code=201)
async def upload_template(file: UploadFile = File(...)):
    """Store the letterhead PDF that every page is drawn onto."""
    if file.content_type and "pdf" not in file.content_type.lower():
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")
    content = await file.read()
    if len(content) == 0:
        raise HTTPException(status_code=400, detail="Empty file")
    if len(content) > MAX_TEMPLATE_BYTES:
        raise HTTPException(status_code=413, detail="Template exceeds configured size limit")
    if not content.startswith(b"%PDF-"):
        raise HTTPException(status_code=400, detail="Uploaded file is not a valid PDF signature")
    try:
        load_template_page(content)
    except TemplateLoadError as exc:
        raise HTTPException(status_code=400, detail=exc.message)

    storage.save_template(content)
    pages = count_pages(content)
    logger.info(f"Stored template ({len(content)} bytes, {pages} page(s))")
    return TemplateResponse(sha256=storage.sha256_bytes(content), bytes=len(content), pages=pages)


@router.get("/prints")
def print_all(db: Session = Depends(get_db)):
    """All stored records as one document, in list order."""
    records = record_store.list_records(db)
    if not records:
        raise HTTPException(status_code=400, detail="No records to print")
    template = _template_bytes()
    signer = record_store.get_signer(db)
    try:
        data = assemble_document(records, template, signer)
    except PdfFillError as exc:
        return _error_response(exc)
    return _pdf(data, "justificativas.pdf")


@router.get("/prints/{record_id}")
def print_one(record_id: str, db: Session = Depends(get_db)):
    stored = record_store.get_record(db, record_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Record not found")
    template = _template_bytes()
    try:
        data = render_page(stored, template, record_store.get_signer(db))
    except PdfFillError as exc:
        return _error_response(exc)
    return _pdf(data, f"justificativa-{stored.medical_record}.pdf")
