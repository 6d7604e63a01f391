"""
Asset operation handlers.

Handlers receive domain input from a version's request mapper and return
a domain Asset for its response mapper, so the same handler can back any
number of API versions.
"""

from app.domain import Asset, AssetChanges, AssetId
from app.services.asset_service import AssetService


async def get_asset(service: AssetService, asset_id: AssetId, changes: AssetChanges | None) -> Asset:
    """Fetch one asset."""
    return await service.get(asset_id)


async def update_asset(service: AssetService, asset_id: AssetId, changes: AssetChanges | None) -> Asset:
    """Apply a decoded update to one asset."""
    return await service.update(asset_id, changes)
