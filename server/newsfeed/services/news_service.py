"""News fetch service - upstream call with rate-limit cache fallback."""

from dataclasses import dataclass
from typing import Any, Optional

import structlog

from .cache import Cache, cache
from .news_api import NewsAPIClient, NewsAPIError, get_news_api_client

logger = structlog.get_logger(__name__)

DEFAULT_QUERY = "news"
DEFAULT_PAGE_SIZE = 40
DEFAULT_PAGE = 1


@dataclass
class NewsResult:
    """Response envelope plus the HTTP status to send it with."""
    status_code: int
    body: dict[str, Any]


class NewsService:
    """Mediates between client requests and NewsAPI.

    Every request goes upstream. The cache is only read back when NewsAPI
    rate-limits us; it never short-circuits a fetch.
    """

    def __init__(self, client: NewsAPIClient, response_cache: Cache):
        self.client = client
        self.cache = response_cache

    async def search(
        self,
        query: str = DEFAULT_QUERY,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> NewsResult:
        """Keyword search across all articles."""
        url = self.client.everything_url(query or DEFAULT_QUERY, page_size, page)
        return await self.fetch_news(url)

    async def headlines(
        self,
        category: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> NewsResult:
        """English top headlines for a category."""
        url = self.client.top_headlines_url(category, page_size, page)
        return await self.fetch_news(url)

    async def country(
        self,
        country_code: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = DEFAULT_PAGE,
    ) -> NewsResult:
        """Top headlines for a two-letter country code."""
        url = self.client.country_url((country_code or "").lower(), page_size, page)
        return await self.fetch_news(url)

    async def fetch_news(self, url: str) -> NewsResult:
        cached = self.cache.get(url)

        try:
            payload = await self.client.fetch(url)
        except NewsAPIError as e:
            return self._handle_failure(e, cached)

        self.cache.set(url, payload)
        logger.debug("Cached NewsAPI response", entries=len(self.cache))

        if (payload.get("totalResults") or 0) > 0:
            return NewsResult(200, {
                "success": True,
                "message": "Successfully fetched the data",
                "data": payload,
            })

        return NewsResult(404, {
            "success": False,
            "message": "No more results to show",
            "data": [],
        })

    def _handle_failure(self, error: NewsAPIError, cached: Optional[Any]) -> NewsResult:
        logger.error(
            "NewsAPI error",
            error=error.message,
            news_api_status=error.status,
            news_api_code=error.code,
        )

        if error.rate_limited and cached is not None:
            logger.debug("Serving cached results after rate limit")
            return NewsResult(200, {
                "success": True,
                "message": "Rate limited by NewsAPI. Serving cached results.",
                "data": cached,
                "meta": {"cached": True},
            })

        if error.rate_limited:
            status_code = 429
            message = "NewsAPI rate limit reached. Please try later or use a new API key."
        else:
            status_code = 500
            message = "Failed to fetch data from the API"

        return NewsResult(status_code, {
            "success": False,
            "message": message,
            "error": error.message,
            "meta": {
                "newsApiStatus": error.status,
                "newsApiCode": error.code,
            },
        })


# Singleton
_service: Optional[NewsService] = None


def get_news_service() -> NewsService:
    """Get the news service singleton."""
    global _service
    if _service is None:
        _service = NewsService(get_news_api_client(), cache)
    return _service
