"""
API version 1 (deprecated).
"""

from app.api.handlers import get_asset, update_asset
from app.api.v1 import mappers
from app.schemas.v1 import V1AssetResponse, V1UpdateAssetRequest
from app.versioning import (
    ApiVersion,
    AssetOperation,
    RegistryEntry,
    RequestMapper,
    ResponseMapper,
)

ENTRY = RegistryEntry(
    version=ApiVersion(1),
    deprecated=True,
    handlers={
        AssetOperation.GET: get_asset,
        AssetOperation.UPDATE: update_asset,
    },
    request_mapper=RequestMapper(
        model=V1UpdateAssetRequest,
        decode=mappers.decode_update_request,
    ),
    response_mapper=ResponseMapper(
        model=V1AssetResponse,
        encode=mappers.encode_asset_response,
    ),
)
