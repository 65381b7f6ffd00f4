"""
Tests for application assembly: settings injection and the engine lifespan.
"""
import pytest
from httpx import ASGITransport, AsyncClient

from backoffice import __version__
from backoffice.app import create_app
from backoffice.config import Settings
from backoffice.db.main import build_engine


@pytest.mark.unit
def test_settings_are_injected(test_settings: Settings):
    app = create_app(test_settings)
    assert app.state.settings is test_settings


@pytest.mark.unit
def test_postgres_url_uses_asyncpg_driver(test_settings: Settings):
    pytest.importorskip("asyncpg")
    settings = test_settings.model_copy(update={"DATABASE_URL": "postgresql://user:secret@db:5432/pos"})

    engine = build_engine(settings)

    assert engine.url.drivername == "postgresql+asyncpg"
    assert engine.pool.size() == settings.DB_POOL_SIZE


@pytest.mark.asyncio
async def test_lifespan_builds_and_disposes_engine(test_settings: Settings):
    app = create_app(test_settings)

    async with app.router.lifespan_context(app):
        assert app.state.engine.url.drivername == "sqlite+aiosqlite"
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/health/db")
        assert response.json()["database"] == "connected"


@pytest.mark.unit
def test_unknown_report_timezone_is_rejected():
    with pytest.raises(ValueError):
        Settings(DATABASE_URL="sqlite+aiosqlite:///:memory:", REPORT_TIMEZONE="Mars/Olympus_Mons")


@pytest.mark.parametrize("days", [0, -1])
@pytest.mark.unit
def test_daily_summary_needs_at_least_one_day(days):
    with pytest.raises(ValueError):
        Settings(DATABASE_URL="sqlite+aiosqlite:///:memory:", DAILY_SUMMARY_DAYS=days)


@pytest.mark.unit
def test_openapi_version_matches_package(test_settings: Settings):
    app = create_app(test_settings)
    assert app.version == __version__
