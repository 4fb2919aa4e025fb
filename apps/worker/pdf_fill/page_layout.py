"""
Where every string of a justification page is drawn.

This module knows nothing about reportlab: the caller supplies a
``measure(text, font_size)`` function and gets back placements in draw
order, which keeps the spacing rules testable with a fake font.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from apps.worker.pdf_fill.constants import (
    CAPTION_GAP,
    CRM_PREFIX,
    FONT_SIZE,
    LINE_SPACING,
    MAX_TEXT_WIDTH,
    PARAGRAPH_GAP,
    PT_BR_MONTHS,
    SERVICE_CAPTION,
    SIGNATURE_GAP,
    SIGNATURE_LINE,
    START_Y,
    TEXT_X,
)
from apps.worker.pdf_fill.cursor import Cursor, SignatureBlockState
from apps.worker.pdf_fill.errors import InvalidRecordError
from apps.worker.pdf_fill.text_layout import Measure, wrap_text
from packages.shared.models import Record, SignerInfo

REQUIRED_FIELDS = ("patient_name", "medical_record", "surgery", "justification")


@dataclass(frozen=True)
class PlacedText:
    text: str
    x: float
    y: float


def validate_record(record: Record) -> None:
    for field in REQUIRED_FIELDS:
        value = getattr(record, field, None)
        if not isinstance(value, str) or not value.strip():
            raise InvalidRecordError(f"Required field '{field}' is empty", field=field)
    if getattr(record, "type", None) is None:
        raise InvalidRecordError("Required field 'type' is empty", field="type")


def _type_label(record: Record) -> str:
    value = getattr(record.type, "value", record.type)
    return str(value).upper()


def compose_intro(record: Record) -> str:
    return (
        f"Solicito a realização de procedimento em caráter {_type_label(record)} que beneficiaria "
        f"o paciente {record.patient_name.upper()} (prontuário {record.medical_record}), acompanhado "
        "no Setor de Oftalmologia deste hospital. A solicitação se justifica pela impossibilidade "
        "de convocar pacientes em posições à frente na fila de espera."
    )


def compose_details(record: Record) -> str:
    return (
        f"O paciente tem indicação de {record.surgery}, justificada por {record.justification}. "
        "A realização do procedimento com brevidade é fundamental para prevenir complicações futuras."
    )


def format_long_date(d: date) -> str:
    """pt-BR long form, e.g. ``19 de outubro de 2026``."""
    return f"{d.day} de {PT_BR_MONTHS[d.month - 1]} de {d.year}"


def _paragraph(lines: list[str], cursor: Cursor, pitch: float, out: list[PlacedText]) -> Cursor:
    for line in lines:
        out.append(PlacedText(line, TEXT_X, cursor.y))
        cursor = cursor.down(pitch)
    return cursor


def _centered(text: str, cursor: Cursor, page_width: float, measure: Measure, font_size: float) -> PlacedText:
    x = (page_width - measure(text, font_size)) / 2
    return PlacedText(text, x, cursor.y)


def layout_page(
    record: Record,
    page_width: float,
    measure: Measure,
    *,
    signer: SignerInfo | None = None,
    today: date | None = None,
    font_size: float = FONT_SIZE,
) -> list[PlacedText]:
    """Placements in draw order. The caller has already run :func:`validate_record`."""
    today = today or date.today()
    pitch = font_size + LINE_SPACING
    placed: list[PlacedText] = []

    cursor = Cursor(START_Y)
    intro = wrap_text(compose_intro(record), measure, font_size, MAX_TEXT_WIDTH)
    cursor = _paragraph(intro, cursor, pitch, placed)
    cursor = cursor.down(PARAGRAPH_GAP)
    details = wrap_text(compose_details(record), measure, font_size, MAX_TEXT_WIDTH)
    cursor = _paragraph(details, cursor, pitch, placed)

    cursor = cursor.down(SIGNATURE_GAP)
    placed.append(_centered(SIGNATURE_LINE, cursor, page_width, measure, font_size))

    state = SignatureBlockState.AFTER_SIGNATURE
    doctor_name = (signer.doctor_name if signer else "") or ""
    crm = (signer.crm if signer else "") or ""
    if doctor_name.strip():
        cursor = cursor.down(state.gap)
        placed.append(_centered(doctor_name.upper(), cursor, page_width, measure, font_size))
        state = SignatureBlockState.AFTER_DOCTOR_NAME
    if crm.strip():
        cursor = cursor.down(state.gap)
        placed.append(_centered(f"{CRM_PREFIX}{crm.upper()}", cursor, page_width, measure, font_size))
        state = SignatureBlockState.AFTER_CRM

    cursor = cursor.down(state.gap)
    placed.append(_centered(format_long_date(today), cursor, page_width, measure, font_size))

    cursor = cursor.down(CAPTION_GAP)
    placed.append(_centered(SERVICE_CAPTION, cursor, page_width, measure, font_size))
    return placed
