"""Business logic services for the Asset API."""

from app.services.asset_service import AssetService

__all__ = ["AssetService"]
