"""
API version 1 wire schemas.

Request:  {status, notes?, value?}
Response: {id, status, notes, value}
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain import AssetStatus
from app.schemas.common import MonetaryAmount, reject_non_numeric


class V1UpdateAssetRequest(BaseModel):
    """Body of PATCH /api/v1/assets/{id}."""

    status: AssetStatus = Field(
        ...,
        description="Asset status",
        examples=["Active"],
    )
    notes: str | None = Field(
        default=None,
        description="Free-form notes",
    )
    value: MonetaryAmount | None = Field(
        default=None,
        description="Monetary value of the asset",
        examples=[100.0],
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> Any:
        """Reject strings and booleans instead of coercing them."""
        return reject_non_numeric(v)


class V1AssetResponse(BaseModel):
    """Asset as seen by version 1 clients."""

    id: str = Field(..., description="Asset identifier")
    status: AssetStatus
    notes: str | None = None
    value: MonetaryAmount | None = None
