"""
API version 2 wire schemas.

Breaking changes from version 1: ``id`` is renamed ``assetId`` and
``value`` is renamed ``totalValue``. ``retiredOn`` is new.

Request:  {status, notes?, totalValue?, retiredOn?}
Response: {assetId, status, notes, totalValue, retiredOn}
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain import AssetStatus
from app.schemas.common import MonetaryAmount, reject_non_numeric


class V2UpdateAssetRequest(BaseModel):
    """Body of PATCH /api/v2/assets/{id}."""

    status: AssetStatus = Field(
        ...,
        description="Asset status",
        examples=["Retired"],
    )
    notes: str | None = Field(
        default=None,
        description="Free-form notes",
    )
    total_value: MonetaryAmount | None = Field(
        default=None,
        alias="totalValue",
        description="Total monetary value of the asset",
        examples=[250.0],
    )
    # Calendar date only; a timestamp with a time of day is a 422 rather
    # than being truncated, so the stored date echoes back exactly
    retired_on: date | None = Field(
        default=None,
        alias="retiredOn",
        description="Retirement date (YYYY-MM-DD, no time of day); only valid with status Retired",
        examples=["2024-01-01"],
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("total_value", mode="before")
    @classmethod
    def validate_total_value(cls, v: Any) -> Any:
        """Reject strings and booleans instead of coercing them."""
        return reject_non_numeric(v)


class V2AssetResponse(BaseModel):
    """Asset as seen by version 2 clients."""

    asset_id: str = Field(..., alias="assetId", description="Asset identifier")
    status: AssetStatus
    notes: str | None = None
    total_value: MonetaryAmount | None = Field(default=None, alias="totalValue")
    retired_on: date | None = Field(default=None, alias="retiredOn")

    model_config = ConfigDict(populate_by_name=True)
