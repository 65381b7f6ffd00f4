"""
Pytest configuration and shared fixtures for backend tests.
"""
import pytest
from datetime import date
from typing import AsyncGenerator
from unittest.mock import AsyncMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.app import create_app
from backoffice.config import Settings
from backoffice.db.main import get_session, Base

# Import all models to ensure they are registered with Base
# This ensures Base.metadata contains all table definitions
from backoffice.sales.models import Sale, SaleItem  # noqa: F401
from backoffice.products.models import Product  # noqa: F401
from backoffice.expenses.models import DailyExpense  # noqa: F401
from backoffice.users.models import User  # noqa: F401
from backoffice.customers.models import Customer  # noqa: F401
from backoffice.purchases.models import PurchaseInvoice  # noqa: F401

from tests.factories import make_product, make_sale, make_item, make_expense, utc


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with overridden values."""
    return Settings(
        ENV="test",
        PORT=8000,
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        REPORT_TIMEZONE="UTC",
        TOP_SELLING_PRODUCTS_LIMIT=20,
        DAILY_SUMMARY_DAYS=5,
        WEB_APP_URL="http://localhost:9002",
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
async def test_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session with in-memory SQLite database.
    Uses StaticPool for synchronous access in async context.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def client(app: FastAPI, test_db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client for FastAPI application.
    Overrides database dependency with test session.
    """
    async def override_get_session():
        yield test_db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def mock_session() -> AsyncMock:
    """AsyncSession double for failure injection and 'no query issued' checks."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
async def mock_client(app: FastAPI, mock_session: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """Test client whose database session is ``mock_session``."""
    async def override_get_session():
        yield mock_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def january_data(test_db_session: AsyncSession) -> AsyncSession:
    """One sale of 100 on 2024-01-05 (2 units costing 10) and 30 of rent the same day."""
    test_db_session.add(make_product())
    test_db_session.add(make_sale("s-1", utc(2024, 1, 5), "100.00"))
    await test_db_session.flush()
    test_db_session.add(make_item("s-1", quantity=2, cost_price="10.00", total_price="100.00"))
    test_db_session.add(make_expense("Rent", "30.00", date(2024, 1, 5)))
    await test_db_session.commit()
    return test_db_session
