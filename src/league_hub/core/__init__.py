"""
Core module for League Hub.

This module provides the foundational components:
- Configuration management (config.py)
- Error types (errors.py)
- Enums and schedule constants (types.py)
- Data models (models.py)

Usage:
    from league_hub.core import Settings, get_settings
    from league_hub.core import StatCategory, Conference, PlayoffRound
    from league_hub.core import Player, Team, Standing, parse_stat_entry
"""

# Configuration
from .config import Settings, get_settings

# Errors
from .errors import InvalidStatEntryError, LeagueHubError, SnapshotLoadError

# Types
from .types import (
    Conference,
    GameResult,
    PlayoffRound,
    StatCategory,
    PLAYOFF_ROUND_WEEKS,
    SEEDS_PER_CONFERENCE,
)

# Models
from .models import (
    AggregatedStatLine,
    BaseStatEntry,
    BracketMatchup,
    Game,
    Player,
    PlayoffPicture,
    PlayoffTeam,
    Standing,
    StatEntry,
    STAT_ENTRY_MODELS,
    Team,
    parse_stat_entry,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "LeagueHubError",
    "InvalidStatEntryError",
    "SnapshotLoadError",
    # Types
    "Conference",
    "GameResult",
    "PlayoffRound",
    "StatCategory",
    "PLAYOFF_ROUND_WEEKS",
    "SEEDS_PER_CONFERENCE",
    # Models
    "AggregatedStatLine",
    "BaseStatEntry",
    "BracketMatchup",
    "Game",
    "Player",
    "PlayoffPicture",
    "PlayoffTeam",
    "Standing",
    "StatEntry",
    "STAT_ENTRY_MODELS",
    "Team",
    "parse_stat_entry",
]
