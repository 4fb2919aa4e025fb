"""
JSON import/export of the record list.
"""
from __future__ import annotations

import json
import uuid

from pydantic import ValidationError

from packages.shared.models import SignerInfo, StoredRecord


class ImportFormatError(ValueError):
    """Raised when an imported file is not a valid record list."""


def export_records_json(records: list[StoredRecord]) -> str:
    payload = [r.model_dump(mode="json", by_alias=True) for r in records]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def parse_records_json(text: str | bytes) -> list[StoredRecord]:
    """
    Parse an exported record list.

    Items without an ``id`` get a fresh one. Any invalid item rejects the
    whole file so a partial list is never imported.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ImportFormatError("Erro ao importar o arquivo. Verifique o formato do arquivo.") from exc
    if not isinstance(data, list):
        raise ImportFormatError("Formato de arquivo inválido.")

    records: list[StoredRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ImportFormatError(f"Formato de arquivo inválido (item {index}).")
        item = {**item, "id": str(item.get("id") or uuid.uuid4().hex)}
        try:
            records.append(StoredRecord.model_validate(item))
        except ValidationError as exc:
            raise ImportFormatError(f"Item {index} inválido: {exc.errors()[0]['msg']}") from exc
    return records


def parse_signer_json(text: str | bytes) -> SignerInfo:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ImportFormatError("Erro ao importar o arquivo. Verifique o formato do arquivo.") from exc
    if not isinstance(data, dict):
        raise ImportFormatError("Formato de arquivo inválido.")
    try:
        return SignerInfo.model_validate(data)
    except ValidationError as exc:
        raise ImportFormatError(f"Dados do médico inválidos: {exc.errors()[0]['msg']}") from exc
