"""Server banner and health check endpoints."""

import platform
import sys
from fastapi import APIRouter

from .. import __version__
from ..config import get_settings
from ..services.cache import cache

router = APIRouter(tags=["stats"])


@router.get("/")
async def root():
    """Server banner with the available news endpoints."""
    return {
        "message": "News API Server is running",
        "endpoints": {
            "allNews": "/all-news",
            "topHeadlines": "/top-headlines",
            "countryNews": "/country/:iso",
        },
    }


@router.get("/health")
async def health_check():
    """Health check and status endpoint."""
    settings = get_settings()

    return {
        "status": "ok",
        "version": __version__,
        "hasApiKey": settings.has_api_key,
        "cache": {
            "entries": len(cache),
            "ttlSeconds": cache.ttl,
            "maxEntries": cache.max_entries,
        },
        "platform": platform.system().lower(),
        "pythonVersion": sys.version,
    }
