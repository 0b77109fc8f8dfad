"""
Stats router - serves aggregated season lines for the stats tables.

Endpoints:
- GET /player/{roster_id} - Every category line for one player
- GET /{category} - Leader board for a category (search, position, team filters)
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Query

from ...core.types import StatCategory
from ...leaders import get_stat_table, line_payload, sortable_keys
from ..dependencies import CacheDependency, LeagueDependency
from ..errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/player/{roster_id}", response_model=None)
async def get_player_stats(
    roster_id: int,
    league: LeagueDependency,
) -> dict[str, Any]:
    """Season lines for one player across every category with entries."""
    lines = league.player_lines(roster_id)
    if not lines:
        raise NotFoundError(resource="Player stats", identifier=roster_id, context=f"league {league.league_id}")

    return {
        "leagueId": league.league_id,
        "rosterId": roster_id,
        "categories": {category.value: line_payload(line) for category, line in lines.items()},
    }


@router.get("/{category}", response_model=None)
async def get_category_leaders(
    category: StatCategory,
    league: LeagueDependency,
    cache: CacheDependency,
    search: Annotated[str | None, Query(description="Match on first or last name")] = None,
    position: Annotated[str | None, Query(description="Exact position, e.g. QB")] = None,
    team_id: Annotated[int | None, Query(description="Only players on this team")] = None,
    sort: Annotated[str | None, Query(description="Stat key to sort by (descending)")] = None,
    limit: Annotated[int | None, Query(ge=1, le=1000)] = None,
) -> dict[str, Any]:
    """
    Leader board for a stat category.

    Sorted descending by the category's default stat unless `sort` is given.
    """
    table = get_stat_table(category)
    if sort is not None and sort not in sortable_keys(category):
        raise ValidationError(
            message=f"Cannot sort {category.value} stats by '{sort}'",
            detail=f"Sortable keys: {', '.join(sorted(sortable_keys(category)))}",
        )

    cache_key = ("leaders", league.league_id, category.value, search, position, team_id, sort, limit)
    cached = cache.get(*cache_key)
    if cached is not None:
        return cached

    lines = league.leaders(
        category, search=search, position=position, team_id=team_id, sort=sort, limit=limit
    )
    result = {
        "leagueId": league.league_id,
        "category": category.value,
        "title": table.title,
        "columns": [{"key": key, "header": header} for key, header in table.columns],
        "sortKey": sort or table.default_sort_key,
        "count": len(lines),
        "lines": [line_payload(line) for line in lines],
    }

    cache.set(result, *cache_key)
    return result
