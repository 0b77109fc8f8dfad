"""
Schedule router.

Endpoints:
- GET / - Games of one week (latest week with games by default)
"""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from ..dependencies import CacheDependency, LeagueDependency
from ..errors import ValidationError

router = APIRouter()


@router.get("", response_model=None)
async def get_schedule(
    league: LeagueDependency,
    cache: CacheDependency,
    week: Annotated[int | None, Query(description="1-based week; 19-21 and 23 are playoff rounds")] = None,
) -> dict[str, Any]:
    """Games for a week ordered by scheduleId, with the week label."""
    cache_key = ("schedule", league.league_id, week)
    cached = cache.get(*cache_key)
    if cached is not None:
        return cached

    try:
        result = {"leagueId": league.league_id, **league.schedule(week)}
    except ValueError as e:
        raise ValidationError(message=f"Invalid week: {week}", detail=str(e)) from e

    cache.set(result, *cache_key)
    return result
