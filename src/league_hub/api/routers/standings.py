"""
Standings router.

Endpoints:
- GET / - Standings ordered by rank, optionally for one conference
"""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from ...core.types import Conference
from ..dependencies import CacheDependency, LeagueDependency

router = APIRouter()


@router.get("", response_model=None)
async def get_standings(
    league: LeagueDependency,
    cache: CacheDependency,
    conference: Annotated[Conference | None, Query(description="AFC or NFC")] = None,
) -> dict[str, Any]:
    """Standings rows with formatted record and win percentage."""
    cache_key = ("standings", league.league_id, conference.value if conference else None)
    cached = cache.get(*cache_key)
    if cached is not None:
        return cached

    rows = league.standings(conference)
    result = {
        "leagueId": league.league_id,
        "conference": conference.value if conference else None,
        "count": len(rows),
        "standings": rows,
    }

    cache.set(result, *cache_key)
    return result
