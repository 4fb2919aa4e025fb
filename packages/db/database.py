"""
Engine and sessions for the JustOFT key/value store.

SQLite under ``DATA_DIR`` unless ``DATABASE_URL`` points elsewhere.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger("justoft.db")


def _database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        data_dir = Path(os.environ.get("DATA_DIR", "data"))
        return f"sqlite:///{(data_dir / 'justoft.db').as_posix()}"
    # hosted Postgres hands out postgres://, SQLAlchemy 2 only accepts postgresql://
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


DATABASE_URL = _database_url()
IS_SQLITE = DATABASE_URL.startswith("sqlite")

engine = create_engine(
    DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False} if IS_SQLITE else {},
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db() -> None:
    """Create the storage table if it is missing."""
    from packages.db.models import Base

    url = make_url(DATABASE_URL)
    if IS_SQLITE and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)
    logger.info(f"Storage ready at {url.render_as_string(hide_password=True)}")


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Session scope: commit on success, roll back and re-raise on error."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a session from :func:`get_session`."""
    with get_session() as session:
        yield session
