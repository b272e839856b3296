"""
Health Check Handler

    GET /health  process is up, reports name and version
    GET /ready   database answers SELECT 1, otherwise 503
    GET /live    process is up
"""

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from booknotes.config.settings import settings
from booknotes.shared.core.exceptions import ServiceUnavailableError
from booknotes.shared.core.logging import get_logger
from booknotes.shared.schemas.common import HealthResponse
from booknotes.api.dependencies import DbSession


logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(service=settings.APP_NAME.lower(), version=settings.APP_VERSION)


@router.get("/ready")
async def readiness_check(db: DbSession):
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Database not ready", error=str(e))
        raise ServiceUnavailableError("Database unavailable") from e
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}
