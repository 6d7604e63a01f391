"""SQLAlchemy declarative base for the asset store."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models (see app.models)."""
