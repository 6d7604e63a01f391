"""Asset domain entities and value objects.

These types are shared by every API version. Wire DTOs never leak into
this module; each version's mappers translate to and from it.
"""

import enum
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

# Store column limits; wider input is rejected rather than truncated
ASSET_ID_MAX_LENGTH = 64
MONEY_MAX_DIGITS = 18
MONEY_DECIMAL_PLACES = 4


class AssetStatus(str, enum.Enum):
    """Lifecycle state of an asset. RETIRED is terminal."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    RETIRED = "Retired"

    @property
    def is_terminal(self) -> bool:
        return self is AssetStatus.RETIRED


@dataclass(frozen=True)
class AssetId:
    """Opaque, string-backed asset identifier.

    Raises:
        ValueError: If the identifier is empty or blank or longer than
            ASSET_ID_MAX_LENGTH characters.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Asset ID must be a non-empty string")
        if len(self.value) > ASSET_ID_MAX_LENGTH:
            raise ValueError(f"Asset ID must be at most {ASSET_ID_MAX_LENGTH} characters")

    def __str__(self) -> str:
        return self.value


class _Unset(enum.Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# Marks a field the caller's API version cannot express.
UNSET = _Unset.UNSET


@dataclass(frozen=True)
class Asset:
    """Internal asset record.

    Attributes:
        id: Asset identifier
        status: Current lifecycle state
        notes: Free-form notes
        value: Monetary value, currency-agnostic
        retired_on: Retirement date, only meaningful once status is terminal
    """

    id: AssetId
    status: AssetStatus
    notes: str | None = None
    value: Decimal | None = None
    retired_on: date | None = None


@dataclass(frozen=True)
class AssetChanges:
    """Input for the update operation.

    ``retired_on`` is UNSET when the caller's version has no such field,
    so the stored value is left alone rather than cleared.
    """

    status: AssetStatus
    notes: str | None = None
    value: Decimal | None = None
    retired_on: date | None | _Unset = UNSET

    def apply_to(self, asset: Asset) -> Asset:
        """Return ``asset`` with these changes applied."""
        retired_on = asset.retired_on if self.retired_on is UNSET else self.retired_on
        if not self.status.is_terminal:
            retired_on = None
        return Asset(
            id=asset.id,
            status=self.status,
            notes=self.notes,
            value=self.value,
            retired_on=retired_on,
        )
