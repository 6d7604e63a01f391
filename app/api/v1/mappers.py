"""
Version 1 mappers: {status, notes?, value?} <-> Asset.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.core.exceptions import DecodeValidationError
from app.domain import Asset, AssetChanges
from app.schemas.error import field_errors
from app.schemas.v1 import V1AssetResponse, V1UpdateAssetRequest


def decode_update_request(body: Any) -> AssetChanges:
    """
    Decode a version 1 update body.

    Version 1 has no retirement date, so the stored one is left untouched.

    Raises:
        DecodeValidationError: Body is not an object or a field is invalid
    """
    if not isinstance(body, Mapping):
        raise DecodeValidationError(
            "Request body must be a JSON object",
            [{"field": "body", "message": "Input should be an object", "type": "dict_type"}],
        )
    try:
        dto = V1UpdateAssetRequest.model_validate(body)
    except ValidationError as e:
        raise DecodeValidationError("Request validation failed", field_errors(e)) from e

    return AssetChanges(status=dto.status, notes=dto.notes, value=dto.value)


def encode_asset_response(asset: Asset) -> dict[str, Any]:
    """Encode an asset in the version 1 shape {id, status, notes, value}."""
    dto = V1AssetResponse(
        id=asset.id.value,
        status=asset.status,
        notes=asset.notes,
        value=asset.value,
    )
    return dto.model_dump(mode="json")
