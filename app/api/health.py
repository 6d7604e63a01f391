"""
Health endpoint.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.dependencies import Versioning

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(versioning: Versioning, db: AsyncSession = Depends(get_db)):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", ...} when the asset store is reachable
        {"status": "degraded", "issues": [...]} otherwise
    """
    issues = []

    # Check asset store connectivity
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Health check: asset store unreachable: {e}")
        issues.append(f"Database: {str(e)}")

    if issues:
        return {
            "status": "degraded",
            "issues": issues,
        }

    return {
        "status": "ok",
        "apiVersions": [str(v) for v in versioning.registry.supported_versions],
    }
