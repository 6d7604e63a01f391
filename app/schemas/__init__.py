"""
Pydantic schemas for request/response validation, one module per API version.
"""

from app.schemas.v1 import V1AssetResponse, V1UpdateAssetRequest
from app.schemas.v2 import V2AssetResponse, V2UpdateAssetRequest
from app.schemas.error import ErrorResponse, FieldError

__all__ = [
    # Version 1
    "V1AssetResponse",
    "V1UpdateAssetRequest",
    # Version 2
    "V2AssetResponse",
    "V2UpdateAssetRequest",
    # Error schemas
    "ErrorResponse",
    "FieldError",
]
