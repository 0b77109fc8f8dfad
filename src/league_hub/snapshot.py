"""
League export loading.

A LeagueSnapshot is the in-memory set of arrays the dashboard works from:
players, teams, standings, schedules and per-category stat entries, all
belonging to one league.

JSON Format:
    {
        "leagueId": "25101040",
        "players": [{"rosterId": 1, "firstName": "...", ...}, ...],
        "teams": [{"teamId": 1, "displayName": "...", ...}, ...],
        "standings": [{"teamId": 1, "rank": 1, "conferenceName": "AFC", ...}, ...],
        "schedules": [{"scheduleId": 1, "weekIndex": 0, ...}, ...],
        "stats": {
            "passing": [{"rosterId": 1, "passAtt": 30, ...}, ...],
            "MADDEN_RUSHING_STAT": [...]
        }
    }

Stat lists may be keyed by category name or by the export collection tag.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.errors import SnapshotLoadError
from .core.models import BaseStatEntry, Game, Player, Standing, StatEntry, Team, parse_stat_entry
from .core.types import FIRST_PLAYOFF_WEEK, LAST_PLAYOFF_WEEK, StatCategory

logger = logging.getLogger(__name__)


class LeagueSnapshot(BaseModel):
    """All export arrays for one league."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    league_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("league_id", "leagueId"),
    )
    players: list[Player] = Field(default_factory=list)
    teams: list[Team] = Field(default_factory=list)
    standings: list[Standing] = Field(default_factory=list)
    schedules: list[Game] = Field(default_factory=list)
    stats: dict[StatCategory, list[StatEntry]] = Field(default_factory=dict)

    @field_validator("league_id", mode="before")
    @classmethod
    def _league_id_as_str(cls, value: Any) -> Any:
        # Exports store the id as a number or a string
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("stats", mode="before")
    @classmethod
    def _tag_stat_entries(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        tagged: dict[StatCategory, list[dict[str, Any]]] = {}
        for key, entries in value.items():
            category = StatCategory.parse(key)
            bucket = tagged.setdefault(category, [])
            for entry in entries or []:
                if isinstance(entry, BaseStatEntry):
                    entry = entry.model_dump()
                bucket.append(parse_stat_entry(category, entry).model_dump())
        return tagged

    def stat_entries(self, category: StatCategory) -> list[BaseStatEntry]:
        return list(self.stats.get(category, []))

    def playoff_games(self) -> list[Game]:
        """Schedule rows from the wild card week through the Super Bowl week."""
        return [g for g in self.schedules if FIRST_PLAYOFF_WEEK <= g.weekIndex <= LAST_PLAYOFF_WEEK]

    def summary(self) -> dict[str, Any]:
        return {
            "league_id": self.league_id,
            "players": len(self.players),
            "teams": len(self.teams),
            "standings": len(self.standings),
            "schedules": len(self.schedules),
            "stat_entries": sum(len(entries) for entries in self.stats.values()),
        }


def load_snapshot(file_path: str | Path, league_id: Optional[str] = None) -> LeagueSnapshot:
    """
    Load a league export from a JSON file.

    Args:
        file_path: Path to the JSON export
        league_id: League id to use instead of the one stored in the export

    Returns:
        Parsed LeagueSnapshot

    Raises:
        SnapshotLoadError: If the file is missing, not JSON, or has the wrong shape
    """
    path = Path(file_path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise SnapshotLoadError(f"League export not found: {path}") from None
    except (OSError, json.JSONDecodeError) as e:
        raise SnapshotLoadError(f"Could not read league export {path}: {e}") from e

    if not isinstance(raw, dict):
        raise SnapshotLoadError(f"League export {path} must be a JSON object")

    try:
        snapshot = LeagueSnapshot.model_validate(raw)
    except ValidationError as e:
        raise SnapshotLoadError(
            f"Invalid league export {path}: {e.error_count()} validation errors"
        ) from e

    if league_id:
        snapshot = snapshot.model_copy(update={"league_id": league_id})

    logger.info("Loaded league export %s: %s", path, snapshot.summary())
    return snapshot
