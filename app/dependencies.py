"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

import json
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.registry import ApiVersioning
from app.core.exceptions import DecodeValidationError
from app.db.session import get_db
from app.services.asset_service import AssetService
from app.versioning import ApiVersion


def get_versioning(request: Request) -> ApiVersioning:
    """Versioning state built at application startup."""
    return request.app.state.versioning


def get_api_version(request: Request) -> ApiVersion:
    """
    Resolve the API version governing this request.

    Raises:
        MalformedVersionError, VersionRequiredError, UnsupportedVersionError
    """
    return get_versioning(request).resolver.resolve(request)


async def get_json_body(request: Request) -> Any:
    """
    Parse the raw JSON request body.

    Bodies are decoded by the resolved version's mapper rather than by
    FastAPI, since the expected shape depends on the version.
    """
    raw = await request.body()
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeValidationError(
            "Request body is not valid JSON",
            [{"field": "body", "message": str(e), "type": "json_invalid"}],
        ) from e


def get_asset_service(db: Annotated[AsyncSession, Depends(get_db)]) -> AssetService:
    return AssetService(db)


# Type aliases for cleaner endpoint signatures
Versioning = Annotated[ApiVersioning, Depends(get_versioning)]
ResolvedVersion = Annotated[ApiVersion, Depends(get_api_version)]
JsonBody = Annotated[Any, Depends(get_json_body)]
Assets = Annotated[AssetService, Depends(get_asset_service)]
