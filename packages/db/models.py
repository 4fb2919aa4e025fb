"""
SQLAlchemy ORM models for JustOFT persistence.

The form tool keeps its state as JSON values under well-known keys, so a
single key/value table is enough.
"""
from __future__ import annotations

from datetime import datetime, timezone as dt_timezone

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.orm import DeclarativeBase


def utcnow():
    return datetime.now(dt_timezone.utc)


class Base(DeclarativeBase):
    pass


class StorageItem(Base):
    __tablename__ = "storage_items"

    key = Column(String(120), primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
