"""NewsAPI upstream client."""

import urllib.parse
from typing import Any, Optional

import httpx
import structlog

from ..config import get_settings

logger = structlog.get_logger(__name__)

RATE_LIMITED_CODE = "rateLimited"


class NewsAPIError(Exception):
    """An upstream request that did not produce a usable payload."""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        self.message = message
        self.status = status
        self.code = code
        super().__init__(message)

    @property
    def rate_limited(self) -> bool:
        return self.status == 429 or self.code == RATE_LIMITED_CODE


class NewsAPIClient:
    """Builds NewsAPI request URLs and performs the GET.

    The built URL doubles as the cache key, so parameter order is fixed
    and must not change between calls.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://newsapi.org/v2",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def everything_url(self, query: str, page_size: int, page: int) -> str:
        q = urllib.parse.quote(query, safe="!*'()")
        return (
            f"{self.base_url}/everything?q={q}"
            f"&pageSize={page_size}&page={page}&apiKey={self.api_key}"
        )

    def top_headlines_url(self, category: str, page_size: int, page: int) -> str:
        return (
            f"{self.base_url}/top-headlines?category={category}&language=en"
            f"&pageSize={page_size}&page={page}&apiKey={self.api_key}"
        )

    def country_url(self, country_code: str, page_size: int, page: int) -> str:
        return (
            f"{self.base_url}/top-headlines?country={country_code}"
            f"&pageSize={page_size}&page={page}&apiKey={self.api_key}"
        )

    async def fetch(self, url: str) -> dict[str, Any]:
        """GET the url once and return the decoded body.

        Raises NewsAPIError for transport failures, non-2xx statuses,
        undecodable bodies and ``{"status": "error"}`` payloads.
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    url,
                    headers={
                        "Accept": "application/json",
                        "User-Agent": "newsfeed-server",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise NewsAPIError(str(e) or e.__class__.__name__) from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            if response.is_success:
                raise NewsAPIError("Malformed response from NewsAPI", status=response.status_code)
            body = {}

        if not response.is_success or body.get("status") == "error":
            raise NewsAPIError(
                body.get("message") or f"NewsAPI returned HTTP {response.status_code}",
                status=response.status_code,
                code=body.get("code"),
            )

        total = body.get("totalResults")
        if total is not None and (isinstance(total, bool) or not isinstance(total, int)):
            raise NewsAPIError("Malformed response from NewsAPI", status=response.status_code)

        return body


def get_news_api_client() -> NewsAPIClient:
    """Build a client from settings."""
    settings = get_settings()
    if not settings.has_api_key:
        logger.warning("NewsAPI key not configured; upstream calls will be rejected")
    return NewsAPIClient(
        api_key=settings.news_api_key,
        base_url=settings.news_api_base_url,
        timeout=settings.upstream_timeout,
    )
