"""Preference catalogue endpoint."""

from fastapi import APIRouter

from ..services.keywords import ALL_KEYWORDS, KEYWORD_GROUPS

router = APIRouter(tags=["preferences"])


@router.get("/preferences/available")
async def available_keywords():
    """Public list of keyword groups a user can follow."""
    return {
        "success": True,
        "data": {
            "categories": KEYWORD_GROUPS,
            "allKeywords": ALL_KEYWORDS,
        },
    }
