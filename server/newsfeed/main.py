"""Newsfeed FastAPI Application Entry Point."""

import uvicorn
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .logging_config import configure_logging
from .routers import (
    stats_router,
    news_router,
    preferences_router,
)

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Newsfeed",
        description="News aggregation backend proxying NewsAPI with a rate-limit fallback cache",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Bare paths for direct clients, /api for clients behind a dev proxy
    for prefix in ("", "/api"):
        app.include_router(stats_router, prefix=prefix)
        app.include_router(news_router, prefix=prefix)
        app.include_router(preferences_router, prefix=prefix)

    return app


app = create_app()


def run():
    """Run the server."""
    settings = get_settings()
    logger.info("Server is running", host=settings.host, port=settings.port)
    uvicorn.run(
        "newsfeed.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
