"""
Asset service - the store collaborator behind every API version.
Reads and writes domain Assets; knows nothing about wire shapes.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AssetNotFoundException
from app.domain import Asset, AssetChanges, AssetId, AssetStatus
from app.models.asset import AssetRecord

logger = logging.getLogger(__name__)


class AssetService:
    """Service class for asset operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_record(self, asset_id: AssetId) -> AssetRecord | None:
        result = await self.db.execute(
            select(AssetRecord).where(AssetRecord.id == asset_id.value)
        )
        return result.scalar_one_or_none()

    async def get(self, asset_id: AssetId) -> Asset:
        """
        Get asset by ID.

        Raises:
            AssetNotFoundException: If asset not found
        """
        record = await self._get_record(asset_id)
        if record is None:
            raise AssetNotFoundException(asset_id.value)
        return record.to_domain()

    async def update(self, asset_id: AssetId, changes: AssetChanges) -> Asset:
        """
        Apply changes to an asset, creating it if it does not exist yet.

        Args:
            asset_id: Asset identifier from the request path
            changes: Decoded update from the caller's API version

        Returns:
            The stored asset after the update
        """
        record = await self._get_record(asset_id)
        current = record.to_domain() if record else Asset(id=asset_id, status=AssetStatus.ACTIVE)
        updated = changes.apply_to(current)

        if record is None:
            record = AssetRecord(id=asset_id.value)
            self.db.add(record)
            logger.info(f"Created asset {asset_id}")
        else:
            logger.info(f"Updated asset {asset_id}")

        record.status = updated.status
        record.notes = updated.notes
        record.value = updated.value
        record.retired_on = updated.retired_on
        await self.db.flush()
        await self.db.refresh(record)

        return record.to_domain()
