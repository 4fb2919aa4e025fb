"""
JustOFT API - FastAPI application entry point.

Serves the justification record list, the signer data and the filled PDFs.
"""
from __future__ import annotations

import logging
import os
import sys
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from packages.db.database import init_db
from packages.shared import storage

API_VERSION = "0.1.0"
DEFAULT_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]
TRUTHY = {"1", "true", "yes", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    values = [v.strip() for v in os.getenv(name, "").split(",")]
    return [v for v in values if v] or default


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    return default if raw is None else raw.strip().lower() in TRUTHY


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("justoft")

cors_allow_origins = _env_list("CORS_ALLOW_ORIGINS", DEFAULT_ORIGINS)
audit_logging_enabled = _env_flag("REQUEST_AUDIT_LOGGING", True)

app = FastAPI(
    title="JustOFT API",
    description="Surgery justification letters for the ophthalmology service",
    version=API_VERSION,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-Id"],
    expose_headers=["Content-Disposition", "X-Request-Id"],
)


@app.middleware("http")
async def request_audit_middleware(request: Request, call_next):
    started = time.perf_counter()
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex

    response = await call_next(request)
    response.headers["X-Request-Id"] = request_id

    if audit_logging_enabled:
        logger.info(
            "request_audit request_id=%s method=%s path=%s status=%s duration_ms=%s",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            int((time.perf_counter() - started) * 1000),
        )
    return response


@app.on_event("startup")
def startup():
    """Create the storage table and report a missing template early."""
    storage.ensure_dirs()
    init_db()
    if not storage.TEMPLATE_PATH.exists():
        logger.warning(f"Template not found at {storage.TEMPLATE_PATH}; upload one with PUT /template")


# Register routes
from apps.api.routes.prints import router as prints_router  # noqa: E402
from apps.api.routes.records import router as records_router  # noqa: E402
from apps.api.routes.signer import router as signer_router  # noqa: E402

for _router in (records_router, signer_router, prints_router):
    app.include_router(_router)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": API_VERSION,
        "template_configured": storage.TEMPLATE_PATH.exists(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("apps.api.main:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
