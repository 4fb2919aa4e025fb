"""
Surgery-justification records and the optional clinician signature data.

Models use camelCase aliases so the JSON exported by the original form
tool (``patientName``, ``medicalRecord``, ``doctorName``) loads unchanged.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import JustificationType


_REQUIRED_MESSAGES = {
    "patient_name": "Nome do paciente é obrigatório.",
    "medical_record": "Número do prontuário é obrigatório.",
    "surgery": "Cirurgia proposta é obrigatória.",
    "justification": "Justificativa é obrigatória.",
}


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    patient_name: str = Field(alias="patientName")
    medical_record: str = Field(alias="medicalRecord")
    type: JustificationType = JustificationType.ELECTIVE
    surgery: str
    justification: str

    @field_validator("patient_name", "medical_record", "surgery", "justification")
    @classmethod
    def _require_text(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        if info.field_name == "medical_record":
            return value
        return value.upper()


class StoredRecord(Record):
    id: str


class SignerInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    doctor_name: str = Field(default="", alias="doctorName")
    crm: str = ""

    @field_validator("doctor_name", "crm", mode="before")
    @classmethod
    def _blank_if_missing(cls, value: Optional[str]):
        if value is None:
            return ""
        # non-strings fall through to the str check and fail validation
        return value.strip() if isinstance(value, str) else value

    @field_validator("doctor_name")
    @classmethod
    def _upper_name(cls, value: str) -> str:
        return value.upper()
