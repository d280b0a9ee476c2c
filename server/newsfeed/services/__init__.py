"""Services for the Newsfeed server."""

from .cache import Cache
from .news_api import NewsAPIClient, NewsAPIError
from .news_service import NewsService, NewsResult

__all__ = ["Cache", "NewsAPIClient", "NewsAPIError", "NewsService", "NewsResult"]
