"""
League Hub

Season stats, standings and playoff picture for a football franchise league,
computed from the league's exported players, teams, standings, schedules and
per-game stat entries.

Key Features:
- Season lines summed from per-game entries, with derived stats (passer rating,
  completion pct, yards per attempt) recomputed from the totals
- Seven-team conference seeding and the full 13-game playoff bracket
- Bracket advancement from played playoff games
- FastAPI service and an argparse CLI over the same LeagueService

Usage:
    from league_hub import load_snapshot, LeagueService

    league = LeagueService(load_snapshot("league_export.json"))
    leaders = league.leaders("passing", limit=10)
    picture = league.playoffs()
"""

from .aggregators import StatAggregator, derive_stats, passer_rating
from .core import (
    AggregatedStatLine,
    BracketMatchup,
    InvalidStatEntryError,
    LeagueHubError,
    PlayoffPicture,
    PlayoffTeam,
    SnapshotLoadError,
    StatCategory,
    parse_stat_entry,
)
from .playoffs import PlayoffSeeder, advance_bracket
from .services import LeagueService
from .snapshot import LeagueSnapshot, load_snapshot

__version__ = "1.0.0"

__all__ = [
    # Aggregation
    "StatAggregator",
    "derive_stats",
    "passer_rating",
    # Playoffs
    "PlayoffSeeder",
    "advance_bracket",
    # Data
    "LeagueSnapshot",
    "load_snapshot",
    "LeagueService",
    # Models
    "AggregatedStatLine",
    "BracketMatchup",
    "PlayoffPicture",
    "PlayoffTeam",
    "StatCategory",
    "parse_stat_entry",
    # Errors
    "LeagueHubError",
    "InvalidStatEntryError",
    "SnapshotLoadError",
]
