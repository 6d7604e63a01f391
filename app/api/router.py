"""
API Router - Aggregates all endpoints.
"""

from fastapi import APIRouter

from app.api import assets, docs, health
from app.config import get_settings

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(assets.router, tags=["assets"])

if get_settings().DOCS_ENABLED:
    api_router.include_router(docs.router, tags=["docs"])
