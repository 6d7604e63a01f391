"""
Versioned Asset API - Main Application Entry Point.

Serves one asset resource through several concurrently supported API
versions. The version registry is built and validated while this module
is imported, so a misconfigured registry prevents the app from starting.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.registry import build_versioning
from app.api.router import api_router
from app.config import get_settings
from app.core.exceptions import AssetAPIException
from app.core.responses import (
    API_PATH_PREFIX,
    ApiVersionReportingMiddleware,
    create_error_response,
    version_report_headers,
)

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Raises RegistryConfigurationError before any request can be accepted
versioning = build_versioning(settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Supported API versions: {versioning.registry.supported_header()}")
    logger.info(f"Default API version: {settings.DEFAULT_API_VERSION}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    from app.db.session import engine, is_sqlite

    # Auto-create tables for SQLite (dev mode)
    if is_sqlite(settings.DATABASE_URL):
        logger.info("Creating SQLite development tables...")
        from app.db.base import Base
        # Import all models to register them
        from app.models import AssetRecord  # noqa: F401
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Development database ready")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    await engine.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Versioned Asset API

One asset resource, several API versions.

### Selecting a version
- URL segment: `/api/v1/assets/{id}`, `/api/v2/assets/{id}`
- Header: `x-api-version: 2` (used when the URL has no version segment)
- Otherwise the default version applies

### Documentation
One OpenAPI document per version under `/openapi/{group}.json`.
    """,
    version="1.0.0",
    # Per-version documents replace the single generated schema
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)
app.state.versioning = versioning

if settings.REPORT_API_VERSIONS:
    app.add_middleware(ApiVersionReportingMiddleware)


@app.exception_handler(AssetAPIException)
async def asset_api_exception_handler(request: Request, exc: AssetAPIException) -> JSONResponse:
    """
    Global exception handler for Asset API exceptions.
    Returns standardized error responses.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.message}")
    else:
        logger.debug(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error}")
    return create_error_response(
        error=exc.error,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    # Served outside the middleware stack, so the version report is added here
    headers = None
    if settings.REPORT_API_VERSIONS and request.url.path.startswith(API_PATH_PREFIX):
        headers = version_report_headers(versioning.registry)
    return create_error_response(
        error="internal_error",
        message="An unexpected error occurred",
        status_code=500,
        headers=headers,
    )


# Include API routers
app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root():
    """Service information and links to the per-version documents."""
    registry = versioning.registry
    return {
        "name": settings.PROJECT_NAME,
        "version": "1.0.0",
        "apiVersions": [str(v) for v in registry.supported_versions],
        "deprecatedApiVersions": [str(v) for v in registry.deprecated_versions],
        "defaultApiVersion": settings.DEFAULT_API_VERSION,
        "docs": (
            {d.group_name: f"/openapi/{d.group_name}.json" for d in registry.descriptors()}
            if settings.DOCS_ENABLED
            else {}
        ),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
