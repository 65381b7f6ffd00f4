import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice import __version__
from backoffice.config import Settings
from backoffice.db.main import build_engine, build_sessionmaker
from backoffice.error_handler import exception_handler
from backoffice.health import router as health_router
from backoffice.products.routes import router as products_router
from backoffice.reports.routes import router as reports_router
from backoffice.sales.routes import router as sales_router
from backoffice.users.routes import router as users_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Set log level for application modules
    logging.getLogger('backoffice').setLevel(settings.LOG_LEVEL.upper())

    # Keep external libraries at WARNING to reduce noise
    logging.getLogger('uvicorn').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one engine (and connection pool) per process
    settings: Settings = app.state.settings
    engine = build_engine(settings)
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    logger.info(f"Database engine ready ({engine.url.render_as_string(hide_password=True)})")
    yield
    # Shutdown: release pooled connections
    await engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings; read from the environment / .env when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()
    configure_logging(settings)

    app = FastAPI(
        title="Back-Office API",
        version=__version__,
        docs_url="/docs" if settings.ENV == "development" else None,
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS Configuration
    if settings.ENV == "development":
        origins = ["http://localhost:3000", "http://localhost:9002"]  # Next.js admin UI dev server
    else:
        origins = [settings.WEB_APP_URL]  # Production domain

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    exception_handler(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(reports_router, prefix="/api/reports", tags=["reports"])
    app.include_router(products_router, prefix="/api/products", tags=["products"])
    app.include_router(sales_router, prefix="/api/sales", tags=["sales"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])

    return app
