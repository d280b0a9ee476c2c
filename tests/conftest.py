import types

import httpx
import pytest

from newsfeed.services import cache as cache_module
from newsfeed.services.cache import Cache
from newsfeed.services.news_api import NewsAPIClient
from newsfeed.services.news_service import NewsService

API_KEY = "test-key"
BASE_URL = "https://newsapi.org/v2"


def make_articles(count):
    return [
        {
            "title": f"Headline {i}",
            "description": f"Description {i}",
            "url": f"https://example.com/articles/{i}",
            "urlToImage": None,
            "source": {"id": None, "name": "Example Times"},
        }
        for i in range(count)
    ]


def ok_body(count):
    return {"status": "ok", "totalResults": count, "articles": make_articles(count)}


RATE_LIMITED_BODY = {
    "status": "error",
    "code": "rateLimited",
    "message": "You have made too many requests recently.",
}


class FakeUpstream:
    """Scripted NewsAPI: each request pops the next queued reply."""

    def __init__(self):
        self.replies = []
        self.requests = []

    def reply(self, status_code, body):
        self.replies.append((status_code, body))
        return self

    def fail(self, exc_type=httpx.ConnectError, message="connection refused"):
        self.replies.append((exc_type, message))
        return self

    def handler(self, request):
        self.requests.append(request)
        first, second = self.replies.pop(0)
        if isinstance(first, type) and issubclass(first, Exception):
            raise first(second, request=request)
        if isinstance(second, (dict, list)):
            return httpx.Response(first, json=second)
        return httpx.Response(first, text=second)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


class FakeClock:
    def __init__(self, start=1_700_000_000.0):
        self.now = start

    def time(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(cache_module, "time", types.SimpleNamespace(time=fake.time))
    return fake


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def news_client(upstream):
    return NewsAPIClient(api_key=API_KEY, base_url=BASE_URL, timeout=5.0, transport=upstream.transport)


@pytest.fixture
def response_cache(clock):
    return Cache(ttl=600)


@pytest.fixture
def news_service(news_client, response_cache):
    return NewsService(news_client, response_cache)


@pytest.fixture
async def async_client(news_service):
    from httpx import AsyncClient, ASGITransport
    from newsfeed.main import app
    from newsfeed.services.news_service import get_news_service

    app.dependency_overrides[get_news_service] = lambda: news_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
