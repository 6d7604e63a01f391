"""
Pytest configuration and fixtures for Asset API tests.
"""

from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from starlette.requests import Request

from app.config import Settings
from app.core.exceptions import AssetNotFoundException
from app.db.base import Base
from app.db.session import get_db
from app.domain import Asset, AssetChanges, AssetId, AssetStatus
from app.main import app


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the shipped versioning defaults."""
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        DEFAULT_API_VERSION="2.0",
        ASSUME_DEFAULT_VERSION_WHEN_UNSPECIFIED=True,
        API_VERSION_HEADER="x-api-version",
    )


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Create a test database engine backed by a temporary SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Build a bare Starlette request for a path and headers."""

    def _make(path: str, headers: dict[str, str] | None = None) -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": b"",
            "headers": [
                (name.lower().encode(), value.encode())
                for name, value in (headers or {}).items()
            ],
        }
        return Request(scope)

    return _make


class InMemoryAssets:
    """Asset store stand-in with the same interface as AssetService."""

    def __init__(self, *assets: Asset):
        self.assets = {asset.id: asset for asset in assets}

    async def get(self, asset_id: AssetId) -> Asset:
        if asset_id not in self.assets:
            raise AssetNotFoundException(asset_id.value)
        return self.assets[asset_id]

    async def update(self, asset_id: AssetId, changes: AssetChanges) -> Asset:
        current = self.assets.get(asset_id, Asset(id=asset_id, status=AssetStatus.ACTIVE))
        self.assets[asset_id] = changes.apply_to(current)
        return self.assets[asset_id]


@pytest.fixture
def in_memory_assets() -> InMemoryAssets:
    return InMemoryAssets()
