"""Domain model for assets, independent of any API version's wire shape."""

from app.domain.asset import UNSET, Asset, AssetChanges, AssetId, AssetStatus

__all__ = ["UNSET", "Asset", "AssetChanges", "AssetId", "AssetStatus"]
