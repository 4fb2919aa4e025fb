"""
API route: Justification records
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from pydantic import BaseModel
from sqlalchemy.orm import Session

from packages.db.database import get_db
from packages.shared import record_store
from packages.shared.models import Record, StoredRecord
from packages.shared.transfer import ImportFormatError, export_records_json, parse_records_json

router = APIRouter(tags=["records"])


class ImportResponse(BaseModel):
    imported: int
    message: str


@router.get("/records", response_model=list[StoredRecord])
def list_records(db: Session = Depends(get_db)):
    return record_store.list_records(db)


@router.post("/records", response_model=StoredRecord, status_code=201)
def create_record(record: Record, db: Session = Depends(get_db)):
    return record_store.add_record(db, record)


@router.delete("/records", status_code=204)
def clear_records(db: Session = Depends(get_db)):
    """Remove every record and the saved signer info."""
    record_store.clear_all(db)
    return Response(status_code=204)


@router.get("/records/export")
def export_records(db: Session = Depends(get_db)):
    body = export_records_json(record_store.list_records(db))
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="dataList.json"'},
    )


@router.post("/records/import", response_model=ImportResponse)
async def import_records(file: UploadFile = File(...), db: Session = Depends(get_db)):
    """Replace the record list with the contents of an exported JSON file."""
    content = await file.read()
    try:
        records = parse_records_json(content)
    except ImportFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    record_store.replace_records(db, records)
    return ImportResponse(imported=len(records), message="Dados importados com sucesso.")


@router.get("/records/{record_id}", response_model=StoredRecord)
def get_record(record_id: str, db: Session = Depends(get_db)):
    stored = record_store.get_record(db, record_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return stored


@router.put("/records/{record_id}", response_model=StoredRecord)
def update_record(record_id: str, record: Record, db: Session = Depends(get_db)):
    stored = record_store.update_record(db, record_id, record)
    if stored is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return stored


@router.delete("/records/{record_id}", status_code=204)
def delete_record(record_id: str, db: Session = Depends(get_db)):
    if not record_store.delete_record(db, record_id):
        raise HTTPException(status_code=404, detail="Record not found")
    return Response(status_code=204)
