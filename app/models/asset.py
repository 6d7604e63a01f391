"""
AssetRecord SQLAlchemy model.
Persistent form of the domain Asset.
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, Enum, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain import Asset, AssetId, AssetStatus
from app.domain.asset import ASSET_ID_MAX_LENGTH, MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS


class AssetRecord(Base):
    """Asset row in the external store."""

    __tablename__ = "assets"

    id: Mapped[str] = mapped_column(
        String(ASSET_ID_MAX_LENGTH),
        primary_key=True,
        comment="Opaque asset identifier",
    )
    status: Mapped[AssetStatus] = mapped_column(
        Enum(AssetStatus, name="asset_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AssetStatus.ACTIVE,
        index=True,
    )
    notes: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    value: Mapped[Decimal | None] = mapped_column(
        Numeric(MONEY_MAX_DIGITS, MONEY_DECIMAL_PLACES, asdecimal=True),
        nullable=True,
        comment="Monetary value, currency-agnostic",
    )
    retired_on: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Set once the asset reaches a terminal status",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def to_domain(self) -> Asset:
        """Convert the row to a domain Asset."""
        return Asset(
            id=AssetId(self.id),
            status=self.status,
            notes=self.notes,
            value=self.value,
            retired_on=self.retired_on,
        )

    def __repr__(self) -> str:
        return f"<AssetRecord(id={self.id}, status={self.status.value})>"
