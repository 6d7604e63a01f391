"""
API version 2 (current).
"""

from app.api.handlers import get_asset, update_asset
from app.api.v2 import mappers
from app.schemas.v2 import V2AssetResponse, V2UpdateAssetRequest
from app.versioning import (
    ApiVersion,
    AssetOperation,
    RegistryEntry,
    RequestMapper,
    ResponseMapper,
)

ENTRY = RegistryEntry(
    version=ApiVersion(2),
    handlers={
        AssetOperation.GET: get_asset,
        AssetOperation.UPDATE: update_asset,
    },
    request_mapper=RequestMapper(
        model=V2UpdateAssetRequest,
        decode=mappers.decode_update_request,
    ),
    response_mapper=ResponseMapper(
        model=V2AssetResponse,
        encode=mappers.encode_asset_response,
    ),
)
