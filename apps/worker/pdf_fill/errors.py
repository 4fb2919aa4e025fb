"""
Typed failures raised while filling the justification template.
"""
from __future__ import annotations


class PdfFillError(Exception):
    """Base class for rendering failures.

    ``record_index`` is set by the assembler when the failure happened
    while rendering one record of a batch.
    """

    def __init__(self, message: str, *, field: str | None = None, record_index: int | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.record_index = record_index

    def __str__(self) -> str:
        if self.record_index is None:
            return self.message
        return f"{self.message} (record {self.record_index})"


class TemplateLoadError(PdfFillError):
    """Template bytes are not a readable PDF or contain no pages."""


class FontEmbedError(PdfFillError):
    """The configured font could not be registered with reportlab."""


class InvalidRecordError(PdfFillError):
    """A required record field is missing or blank."""


class AssemblyCancelledError(PdfFillError):
    """Batch assembly was stopped before all records were rendered."""
