"""
SQLAlchemy ORM models for the Asset API.
"""

from app.models.asset import AssetRecord

__all__ = ["AssetRecord"]
