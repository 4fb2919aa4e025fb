"""
Unit tests for Record / SignerInfo validation at the trust boundary.
"""
import pytest
from pydantic import ValidationError

from packages.shared.models import JustificationType, Record, SignerInfo, StoredRecord


class TestRecord:
    def test_accepts_camel_case_aliases(self):
        record = Record.model_validate(
            {
                "patientName": "maria",
                "medicalRecord": "00123",
                "type": "Urgente",
                "surgery": "vitrectomia",
                "justification": "descolamento de retina",
            }
        )
        assert record.patient_name == "MARIA"
        assert record.type is JustificationType.URGENT

    def test_normalizes_to_upper_case_except_medical_record(self):
        record = Record(
            patient_name="  jose  ",
            medical_record="ab-12",
            surgery="facectomia",
            justification="catarata",
        )
        assert record.patient_name == "JOSE"
        assert record.medical_record == "ab-12"
        assert record.surgery == "FACECTOMIA"
        assert record.justification == "CATARATA"

    def test_type_defaults_to_elective(self):
        record = Record(patient_name="a", medical_record="1", surgery="b", justification="c")
        assert record.type is JustificationType.ELECTIVE

    @pytest.mark.parametrize(
        "field,message",
        [
            ("patient_name", "Nome do paciente é obrigatório."),
            ("medical_record", "Número do prontuário é obrigatório."),
            ("surgery", "Cirurgia proposta é obrigatória."),
            ("justification", "Justificativa é obrigatória."),
        ],
    )
    def test_blank_required_field_rejected(self, field, message):
        values = dict(patient_name="a", medical_record="1", surgery="b", justification="c")
        values[field] = "   "
        with pytest.raises(ValidationError) as excinfo:
            Record(**values)
        assert message in str(excinfo.value)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Record(patient_name="a", medical_record="1", type="Imediato", surgery="b", justification="c")

    def test_is_immutable(self):
        record = Record(patient_name="a", medical_record="1", surgery="b", justification="c")
        with pytest.raises(ValidationError):
            record.patient_name = "other"

    def test_stored_record_dumps_aliases(self):
        stored = StoredRecord(id="x1", patient_name="a", medical_record="1", surgery="b", justification="c")
        dumped = stored.model_dump(mode="json", by_alias=True)
        assert dumped == {
            "id": "x1",
            "patientName": "A",
            "medicalRecord": "1",
            "type": "Eletivo",
            "surgery": "B",
            "justification": "C",
        }


class TestSignerInfo:
    def test_defaults_are_blank(self):
        signer = SignerInfo()
        assert signer.doctor_name == ""
        assert signer.crm == ""

    def test_none_becomes_blank(self):
        signer = SignerInfo.model_validate({"doctorName": None, "crm": None})
        assert signer.doctor_name == ""
        assert signer.crm == ""

    def test_name_upper_cased_and_stripped(self):
        signer = SignerInfo.model_validate({"doctorName": " ana lima ", "crm": " 999 "})
        assert signer.doctor_name == "ANA LIMA"
        assert signer.crm == "999"

    def test_numeric_crm_rejected(self):
        with pytest.raises(ValidationError):
            SignerInfo.model_validate({"doctorName": "ana", "crm": 12345})

    def test_numeric_doctor_name_rejected(self):
        with pytest.raises(ValidationError):
            SignerInfo.model_validate({"doctorName": 7})
