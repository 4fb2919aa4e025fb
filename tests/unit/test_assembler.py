"""
Unit tests for multi-record document assembly.
"""
from __future__ import annotations

import io
import threading
from datetime import date

import pytest
from pypdf import PdfReader

from apps.worker.pdf_fill import (
    AssemblyCancelledError,
    InvalidRecordError,
    TemplateLoadError,
    assemble_document,
    count_pages,
)
from apps.worker.pdf_fill import assembler
from apps.worker.pdf_fill.page_layout import format_long_date
from packages.shared.models import Record
from tests.fixtures.generate_fixture import create_empty_pdf, create_template_pdf, make_record, make_signer

TODAY = date(2026, 10, 19)


@pytest.fixture
def template() -> bytes:
    return create_template_pdf()


def _invalid_record() -> Record:
    return Record.model_construct(**{**make_record().model_dump(), "surgery": ""})


def _page_texts(pdf_bytes: bytes) -> list[str]:
    return [" ".join((p.extract_text() or "").split()) for p in PdfReader(io.BytesIO(pdf_bytes)).pages]


def test_three_records_three_pages_in_order(template: bytes) -> None:
    records = [make_record(patient_name=name, medical_record=str(i)) for i, name in enumerate(["Ana", "Bruno", "Carla"])]
    pdf = assemble_document(records, template, today=TODAY)
    assert count_pages(pdf) == 3
    texts = _page_texts(pdf)
    assert "ANA" in texts[0]
    assert "BRUNO" in texts[1]
    assert "CARLA" in texts[2]


def test_duplicates_are_kept(template: bytes) -> None:
    record = make_record()
    pdf = assemble_document([record, record], template, today=TODAY)
    assert count_pages(pdf) == 2


def test_signer_on_every_page(template: bytes) -> None:
    pdf = assemble_document([make_record(), make_record(patient_name="Outro")], template, make_signer(), today=TODAY)
    assert all("CRM: 12345-CE" in text for text in _page_texts(pdf))


def test_invalid_record_aborts_with_index(template: bytes) -> None:
    records = [make_record(), _invalid_record(), make_record()]
    progress: list[tuple[int, int]] = []
    with pytest.raises(InvalidRecordError) as excinfo:
        assemble_document(records, template, today=TODAY, on_progress=lambda done, total: progress.append((done, total)))
    assert excinfo.value.record_index == 1
    assert excinfo.value.field == "surgery"
    assert "record 1" in str(excinfo.value)
    assert progress == [(1, 3)]


def test_bad_template_fails_at_first_record() -> None:
    with pytest.raises(TemplateLoadError) as excinfo:
        assemble_document([make_record(), make_record()], b"garbage", today=TODAY)
    assert excinfo.value.record_index == 0


def test_template_without_pages_fails_at_first_record() -> None:
    with pytest.raises(TemplateLoadError, match="no pages") as excinfo:
        assemble_document([make_record(), make_record()], create_empty_pdf(), today=TODAY)
    assert excinfo.value.record_index == 0


def test_cancellation_between_records(template: bytes) -> None:
    stop = threading.Event()

    def on_progress(done: int, total: int) -> None:
        if done == 2:
            stop.set()

    with pytest.raises(AssemblyCancelledError) as excinfo:
        assemble_document([make_record()] * 4, template, today=TODAY, stop_event=stop, on_progress=on_progress)
    assert excinfo.value.record_index == 2


def test_progress_reports_every_record(template: bytes) -> None:
    progress: list[tuple[int, int]] = []
    assemble_document([make_record()] * 3, template, today=TODAY, on_progress=lambda d, t: progress.append((d, t)))
    assert progress == [(1, 3), (2, 3), (3, 3)]


def test_date_fixed_once_per_batch(template: bytes, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[date] = []
    real_render = assembler.render_page

    def recording_render(record, template_bytes, signer=None, *, today=None, font_size=None):
        seen.append(today)
        return real_render(record, template_bytes, signer, today=today, font_size=font_size)

    monkeypatch.setattr(assembler, "render_page", recording_render)
    pdf = assemble_document([make_record()] * 3, template)
    assert len(set(seen)) == 1
    assert seen[0] is not None
    assert all(format_long_date(seen[0]) in text for text in _page_texts(pdf))


def test_same_batch_is_deterministic(template: bytes) -> None:
    records = [make_record(), make_record(patient_name="Jose")]
    assert assemble_document(records, template, today=TODAY) == assemble_document(records, template, today=TODAY)
