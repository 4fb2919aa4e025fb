"""
Local disk location of the PDF letterhead template.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("DATA_DIR", "data"))
TEMPLATE_PATH = Path(os.environ.get("JUSTOFT_TEMPLATE_PATH", str(DATA_DIR / "modelo.pdf")))


def ensure_dirs() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def load_template_bytes(path: str | os.PathLike[str] | None = None) -> bytes:
    """Read the template PDF. Raises FileNotFoundError when it is missing."""
    return Path(path or TEMPLATE_PATH).read_bytes()


def save_template(data: bytes, path: str | os.PathLike[str] | None = None) -> Path:
    """Replace the template file; readers never see a half-written PDF."""
    target = Path(path or TEMPLATE_PATH)
    target.parent.mkdir(parents=True, exist_ok=True)
    partial = target.with_name(target.name + ".part")
    partial.write_bytes(data)
    partial.replace(target)
    return target
