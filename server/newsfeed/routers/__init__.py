"""API Routers for the Newsfeed server."""

from .stats import router as stats_router
from .news import router as news_router
from .preferences import router as preferences_router

__all__ = [
    "stats_router",
    "news_router",
    "preferences_router",
]
