"""
League service - the computations the API and CLI serve for one snapshot.

Every call recomputes from the snapshot; caching is the caller's concern.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .aggregators import StatAggregator
from .core.models import AggregatedStatLine, PlayoffPicture
from .core.types import Conference, StatCategory
from .leaders import stat_leaders
from .playoffs import PlayoffSeeder, advance_bracket
from .schedule import week_schedule
from .snapshot import LeagueSnapshot
from .standings import standings_table

logger = logging.getLogger(__name__)


class LeagueService:
    """Stats, standings and playoff views over a LeagueSnapshot."""

    def __init__(self, snapshot: LeagueSnapshot):
        self.snapshot = snapshot

    @property
    def league_id(self) -> Optional[str]:
        return self.snapshot.league_id

    def season_lines(self, category: str | StatCategory) -> list[AggregatedStatLine]:
        category = StatCategory.parse(category)
        return StatAggregator.aggregate_category(
            category,
            self.snapshot.stat_entries(category),
            players=self.snapshot.players,
            teams=self.snapshot.teams,
            league_id=self.league_id,
        )

    def leaders(
        self,
        category: str | StatCategory,
        search: Optional[str] = None,
        position: Optional[str] = None,
        team_id: Optional[int] = None,
        sort: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[AggregatedStatLine]:
        return stat_leaders(
            self.season_lines(category),
            category,
            search=search,
            position=position,
            team_id=team_id,
            sort=sort,
            limit=limit,
        )

    def player_lines(self, roster_id: int) -> dict[StatCategory, AggregatedStatLine]:
        """Every category line for one player; categories without entries are absent."""
        lines = {}
        for category in StatCategory:
            entries = [e for e in self.snapshot.stat_entries(category) if e.rosterId == roster_id]
            if not entries:
                continue
            lines[category] = StatAggregator.aggregate_category(
                category,
                entries,
                players=self.snapshot.players,
                teams=self.snapshot.teams,
                league_id=self.league_id,
            )[0]
        return lines

    def standings(self, conference: Optional[Conference] = None) -> list[dict[str, Any]]:
        return standings_table(self.snapshot.standings, self.snapshot.teams, conference=conference)

    def schedule(self, week: Optional[int] = None) -> dict[str, Any]:
        """Games of a 1-based week, the latest week with games by default.

        Raises:
            ValueError: If the week has no label
        """
        return week_schedule(self.snapshot.schedules, self.snapshot.teams, week=week)

    def playoffs(self) -> PlayoffPicture:
        picture = PlayoffSeeder.build(
            self.snapshot.standings, self.snapshot.teams, league_id=self.league_id
        )
        return advance_bracket(picture, self.snapshot.playoff_games())
