"""News endpoints - search, category headlines and country headlines."""

import re
from typing import Literal, Optional, Union
from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse
import structlog

from ..config import get_settings
from ..services.news_service import DEFAULT_PAGE, NewsResult, NewsService, get_news_service

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["news"])

Category = Literal[
    "business", "entertainment", "general", "health", "science", "sports", "technology"
]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_page_int(value: Optional[str], default: int) -> int:
    """parseInt-style parsing: takes the leading integer, so '20abc' is 20.

    Falls back to default when there are no leading digits or the value is 0.
    """
    match = _LEADING_INT.match(value or "")
    if not match:
        return default
    return int(match.group(1)) or default


def pagination(
    page_size: Optional[str] = Query(None, alias="pageSize"),
    page: Optional[str] = Query(None),
) -> tuple[int, int]:
    return (
        parse_page_int(page_size, get_settings().default_page_size),
        parse_page_int(page, DEFAULT_PAGE),
    )


def _respond(result: NewsResult) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.get("/all-news")
async def all_news(
    q: Optional[str] = Query(None, description="Free-text search query"),
    paging: tuple[int, int] = Depends(pagination),
    service: NewsService = Depends(get_news_service),
):
    """Search all articles by keyword."""
    page_size, page = paging
    return _respond(await service.search(q or "news", page_size, page))


@router.get("/top-headlines")
async def top_headlines(
    category: Union[Category, Literal[""]] = Query("business"),
    paging: tuple[int, int] = Depends(pagination),
    service: NewsService = Depends(get_news_service),
):
    """Top headlines for a category."""
    page_size, page = paging
    return _respond(await service.headlines(category or "business", page_size, page))


@router.get("/country/{iso}")
async def country_news(
    iso: str = Path(..., min_length=2, max_length=2, pattern="^[A-Za-z]{2}$"),
    paging: tuple[int, int] = Depends(pagination),
    service: NewsService = Depends(get_news_service),
):
    """Top headlines for a country."""
    page_size, page = paging
    country = iso.lower()
    logger.info("Fetching news for country", country=country)
    return _respond(await service.country(country, page_size, page))
