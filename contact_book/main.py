"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from contact_book.api.errors import register_exception_handlers
from contact_book.api.middleware import RequestContextMiddleware
from contact_book.api.routes import api_router
from contact_book.logging_config import setup_logging
from contact_book.persistence.database import Database
from contact_book.settings import settings

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager: owns the store handle."""
    # Startup
    database = Database(settings.async_database_url, echo=settings.database_echo)
    if settings.create_tables_on_startup:
        await database.create_all()
    app.state.database = database
    logger.info("Database ready", extra={"dialect": database.engine.dialect.name})
    yield
    # Shutdown
    await database.dispose()
    logger.info("Database connections closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Clients and their phone/email contacts",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
