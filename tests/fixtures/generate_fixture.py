"""
Generate template PDFs and sample records for tests.
"""
from __future__ import annotations

import io

from pypdf import PdfWriter
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from packages.shared.models import JustificationType, Record, SignerInfo


def create_template_pdf(pages: int = 1, pagesize: tuple[float, float] = A4) -> bytes:
    """Letterhead-only template, like the hospital's modelo.pdf."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=pagesize, invariant=1)
    width, height = pagesize
    for i in range(pages):
        c.setFont("Helvetica-Bold", 12)
        c.drawCentredString(width / 2, height - 60, "HOSPITAL GERAL DE FORTALEZA")
        c.setFont("Helvetica", 9)
        c.drawCentredString(width / 2, height - 74, f"Letterhead {i + 1}")
        c.line(50, height - 82, width - 50, height - 82)
        c.showPage()
    c.save()
    return buf.getvalue()


def create_empty_pdf() -> bytes:
    """Well-formed PDF with no pages at all."""
    buf = io.BytesIO()
    PdfWriter().write(buf)
    return buf.getvalue()


def make_record(
    patient_name: str = "Maria da Silva",
    medical_record: str = "123456",
    type: JustificationType = JustificationType.URGENT,
    surgery: str = "Facectomia com implante de lente intraocular",
    justification: str = "Catarata total com baixa acuidade visual bilateral",
) -> Record:
    return Record(
        patient_name=patient_name,
        medical_record=medical_record,
        type=type,
        surgery=surgery,
        justification=justification,
    )


def make_signer(doctor_name: str = "Joao Pereira", crm: str = "12345-ce") -> SignerInfo:
    return SignerInfo(doctor_name=doctor_name, crm=crm)
