"""
API route: Clinician signature info
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from packages.db.database import get_db
from packages.shared import record_store
from packages.shared.models import SignerInfo

router = APIRouter(tags=["signer"])


@router.get("/signer", response_model=SignerInfo)
def get_signer(db: Session = Depends(get_db)):
    return record_store.get_signer(db)


@router.put("/signer", response_model=SignerInfo)
def save_signer(signer: SignerInfo, db: Session = Depends(get_db)):
    return record_store.save_signer(db, signer)
