"""
Liveness probe.

Runs a trivial query against the store and reports healthy or unhealthy.
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.responses import JSONResponse

from reading_list.db import schemas
from reading_list.db.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=schemas.HealthStatus, response_model_exclude_none=True)
def health_check(db: Session = Depends(get_db)):
    try:
        value = db.execute(text("SELECT 1 AS health")).scalar()
        if value != 1:
            raise RuntimeError("Database query failed")
    except (SQLAlchemyError, RuntimeError) as exc:
        logger.exception("health_check_failed")
        body = schemas.HealthStatus(
            status="unhealthy",
            timestamp=_timestamp(),
            database="disconnected",
            error=str(exc),
        )
        return JSONResponse(body.model_dump(exclude_none=True), status_code=503)
    return schemas.HealthStatus(status="healthy", timestamp=_timestamp(), database="connected")
