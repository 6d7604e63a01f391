"""
Asset endpoints.

One route set serves every API version. The version is resolved per
request (URL segment, then x-api-version header, then the default) and
the request is dispatched through the version registry. The unversioned
alias /api/assets/{asset_id} relies on the header or the default.
"""

from fastapi import APIRouter

from app.dependencies import Assets, JsonBody, ResolvedVersion, Versioning
from app.versioning import AssetOperation

router = APIRouter()

VERSIONED_PATH = "/api/v{version}/assets/{asset_id}"
UNVERSIONED_PATH = "/api/assets/{asset_id}"


@router.get(VERSIONED_PATH, include_in_schema=False)
@router.get(UNVERSIONED_PATH, include_in_schema=False)
async def get_asset(
    asset_id: str,
    api_version: ResolvedVersion,
    versioning: Versioning,
    assets: Assets,
):
    """Get an asset in the resolved version's shape."""
    return await versioning.dispatcher.dispatch(
        api_version, AssetOperation.GET, asset_id, None, assets
    )


@router.patch(VERSIONED_PATH, include_in_schema=False)
@router.patch(UNVERSIONED_PATH, include_in_schema=False)
async def update_asset(
    asset_id: str,
    api_version: ResolvedVersion,
    body: JsonBody,
    versioning: Versioning,
    assets: Assets,
):
    """Update an asset from a body in the resolved version's shape."""
    return await versioning.dispatcher.dispatch(
        api_version, AssetOperation.UPDATE, asset_id, body, assets
    )
