"""
Version 2 mappers: {status, notes?, totalValue?, retiredOn?} <-> Asset.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.core.exceptions import DecodeValidationError
from app.domain import Asset, AssetChanges, AssetStatus
from app.schemas.error import field_errors
from app.schemas.v2 import V2AssetResponse, V2UpdateAssetRequest


def decode_update_request(body: Any) -> AssetChanges:
    """
    Decode a version 2 update body.

    ``retiredOn`` belongs to this version's shape, so leaving it out
    clears the stored date. It is only accepted alongside a terminal
    status.

    Raises:
        DecodeValidationError: Body is not an object, a field is invalid,
            or retiredOn is given for a non-terminal status
    """
    if not isinstance(body, Mapping):
        raise DecodeValidationError(
            "Request body must be a JSON object",
            [{"field": "body", "message": "Input should be an object", "type": "dict_type"}],
        )
    try:
        dto = V2UpdateAssetRequest.model_validate(body)
    except ValidationError as e:
        raise DecodeValidationError("Request validation failed", field_errors(e)) from e

    if dto.retired_on is not None and not dto.status.is_terminal:
        raise DecodeValidationError(
            "Request validation failed",
            [{
                "field": "retiredOn",
                "message": f"retiredOn is only allowed when status is '{AssetStatus.RETIRED.value}'",
                "type": "value_error",
            }],
        )

    return AssetChanges(
        status=dto.status,
        notes=dto.notes,
        value=dto.total_value,
        retired_on=dto.retired_on,
    )


def encode_asset_response(asset: Asset) -> dict[str, Any]:
    """Encode an asset in the version 2 shape {assetId, status, notes, totalValue, retiredOn}."""
    dto = V2AssetResponse(
        asset_id=asset.id.value,
        status=asset.status,
        notes=asset.notes,
        total_value=asset.value,
        retired_on=asset.retired_on,
    )
    return dto.model_dump(mode="json", by_alias=True)
