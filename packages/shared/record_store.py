"""
Record list and signer info persisted as JSON values under fixed keys.

The keys and JSON shapes match the browser storage of the original form
tool, so an exported ``dataList.json`` can be loaded as-is.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy.orm import Session

from packages.db.models import StorageItem
from packages.shared.models import Record, SignerInfo, StoredRecord

RECORDS_KEY = "dataList"
SIGNER_KEY = "doctorInfo"

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _read(db: Session, key: str) -> Any:
    item = db.get(StorageItem, key)
    return None if item is None else item.value


def _write(db: Session, key: str, value: Any) -> None:
    item = db.get(StorageItem, key)
    if item is None:
        db.add(StorageItem(key=key, value=value))
    else:
        item.value = value
    db.flush()


def list_records(db: Session) -> list[StoredRecord]:
    raw = _read(db, RECORDS_KEY) or []
    return [StoredRecord.model_validate(item) for item in raw]


def replace_records(db: Session, records: list[StoredRecord]) -> None:
    _write(db, RECORDS_KEY, [r.model_dump(mode="json", by_alias=True) for r in records])


def get_record(db: Session, record_id: str) -> StoredRecord | None:
    return next((r for r in list_records(db) if r.id == record_id), None)


def add_record(db: Session, record: Record) -> StoredRecord:
    stored = StoredRecord(id=_new_id(), **record.model_dump())
    replace_records(db, [*list_records(db), stored])
    logger.info(f"Added record {stored.id}")
    return stored


def update_record(db: Session, record_id: str, record: Record) -> StoredRecord | None:
    records = list_records(db)
    for i, existing in enumerate(records):
        if existing.id == record_id:
            records[i] = StoredRecord(id=record_id, **record.model_dump())
            replace_records(db, records)
            return records[i]
    return None


def delete_record(db: Session, record_id: str) -> bool:
    records = list_records(db)
    kept = [r for r in records if r.id != record_id]
    if len(kept) == len(records):
        return False
    replace_records(db, kept)
    return True


def get_signer(db: Session) -> SignerInfo:
    raw = _read(db, SIGNER_KEY)
    return SignerInfo.model_validate(raw) if raw else SignerInfo()


def save_signer(db: Session, signer: SignerInfo) -> SignerInfo:
    _write(db, SIGNER_KEY, signer.model_dump(mode="json", by_alias=True))
    return signer


def clear_all(db: Session) -> None:
    for key in (RECORDS_KEY, SIGNER_KEY):
        item = db.get(StorageItem, key)
        if item is not None:
            db.delete(item)
    db.flush()
    logger.info("Cleared records and signer info")
