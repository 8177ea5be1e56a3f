"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from construction_portal.config import get_settings
from construction_portal.infrastructure.database import Base, engine
from construction_portal.infrastructure.logging.log_config import setup_logging
from construction_portal.presentation.api.error_handlers import add_exception_handlers
from construction_portal.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    prefix, _, path = database_url.partition(":///")
    if not prefix.startswith("sqlite") or not path or path.startswith(":memory:"):
        return
    directory = Path(path).parent
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.info("Created session store directory %s", directory)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — set up logging and the login-session table."""
    settings = get_settings()
    setup_logging()

    _ensure_sqlite_directory(settings.database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(
        "%s %s started (%s), upstream API at %s",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        settings.api_base_url,
    )

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "construction_portal.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
