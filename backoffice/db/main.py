from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

from backoffice.config import Settings

Base = declarative_base()


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the process-wide async engine (and its connection pool).

    The engine is built once in the application lifespan and kept on
    ``app.state``; nothing in the code base reads connection parameters
    from module-level state.
    """
    # Convert postgresql:// to postgresql+asyncpg://
    database_url = settings.DATABASE_URL.replace(
        "postgresql://", "postgresql+asyncpg://", 1
    )

    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=settings.DB_ECHO)

    return create_async_engine(
        database_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        echo=settings.DB_ECHO,
        connect_args={
            "statement_cache_size": 0,  # Disable prepared statements for pgbouncer compatibility
        },
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# Dependency for FastAPI
async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.sessionmaker
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
