"""
Playoffs router.

Endpoints:
- GET / - Seeds for both conferences and the bracket, with results applied
"""

import logging
from typing import Any

from fastapi import APIRouter

from ...formatting import round_title
from ..dependencies import CacheDependency, LeagueDependency

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=None)
async def get_playoff_picture(league: LeagueDependency, cache: CacheDependency) -> dict[str, Any]:
    """
    Current playoff picture.

    `determined` is false (and `matchups` empty) until both conferences
    have seven seeds.
    """
    cache_key = ("playoffs", league.league_id)
    cached = cache.get(*cache_key)
    if cached is not None:
        return cached

    picture = league.playoffs()
    result = picture.model_dump(mode="json", by_alias=True)
    for matchup in result["matchups"]:
        matchup["title"] = round_title(matchup["round"])
    result["determined"] = picture.is_determined

    cache.set(result, *cache_key)
    return result
