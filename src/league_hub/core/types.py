"""
Core types and constants for League Hub.

This module provides:
- StatCategory, Conference and PlayoffRound enums
- GameResult and the player trait enums exported by the game
- Playoff week constants (0-based weekIndex as stored in schedules)
"""

from enum import Enum, IntEnum
from typing import Optional

from .errors import InvalidStatEntryError


class StatCategory(str, Enum):
    """Per-game player stat categories."""

    passing = "passing"
    rushing = "rushing"
    receiving = "receiving"
    defense = "defense"
    kicking = "kicking"
    punting = "punting"

    @property
    def tag(self) -> str:
        """Collection tag used by the game export (e.g. MADDEN_PASSING_STAT)."""
        return STAT_CATEGORY_TAGS[self]

    @classmethod
    def parse(cls, value: "str | StatCategory") -> "StatCategory":
        """
        Resolve a category from an enum member, its value, or an export tag.

        Raises:
            InvalidStatEntryError: If the value names no known category
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for category in cls:
            if key.lower() == category.value or key.upper() == category.tag:
                return category
        raise InvalidStatEntryError(f"Unknown stat category: {value!r}")


STAT_CATEGORY_TAGS: dict[StatCategory, str] = {
    StatCategory.passing: "MADDEN_PASSING_STAT",
    StatCategory.rushing: "MADDEN_RUSHING_STAT",
    StatCategory.receiving: "MADDEN_RECEIVING_STAT",
    StatCategory.defense: "MADDEN_DEFENSIVE_STAT",
    StatCategory.kicking: "MADDEN_KICKING_STAT",
    StatCategory.punting: "MADDEN_PUNTING_STAT",
}


class Conference(str, Enum):
    """Football conferences."""

    AFC = "AFC"
    NFC = "NFC"

    @classmethod
    def match(cls, name: Optional[str]) -> Optional["Conference"]:
        """Case-insensitive lookup of a conference name. None if unknown."""
        if not name:
            return None
        try:
            return cls(name.strip().upper())
        except ValueError:
            return None


class PlayoffRound(str, Enum):
    """Playoff rounds, in bracket order."""

    wildcard = "wildcard"
    divisional = "divisional"
    conference = "conference"
    superbowl = "superbowl"


class GameResult(IntEnum):
    """Schedule gameStatus values."""

    NOT_PLAYED = 0
    AWAY_WIN = 1
    HOME_WIN = 2
    TIE = 3


# =============================================================================
# Player traits (integer codes as exported by the game)
# =============================================================================


class DevTrait(IntEnum):
    NORMAL = 0
    STAR = 1
    SUPERSTAR = 2
    XFACTOR = 3


class QBStyleTrait(IntEnum):
    BALANCED = 0
    POCKET = 1
    SCRAMBLING = 2


class SensePressureTrait(IntEnum):
    IDEAL = 0
    AVERAGE = 1
    PARANOID = 2
    TRIGGER_HAPPY = 3
    OBLIVIOUS = 4


class PenaltyTrait(IntEnum):
    DISCIPLINED = 0
    NORMAL = 1
    UNDISCIPLINED = 2


class YesNoTrait(IntEnum):
    # The export encodes "yes" as 0
    YES = 0
    NO = 1


class PlayBallTrait(IntEnum):
    AGGRESSIVE = 0
    BALANCED = 1
    CONSERVATIVE = 2


class CoverBallTrait(IntEnum):
    ALWAYS = 0
    ON_BIG_HITS = 1
    ON_MEDIUM_HITS = 2
    FOR_ALL_HITS = 3
    NEVER = 4


class LBStyleTrait(IntEnum):
    BALANCED = 0
    COVER_LB = 1
    PASS_RUSH = 2


# =============================================================================
# Schedule constants
# =============================================================================

REGULAR_SEASON_WEEKS = 18

# 0-based weekIndex of each playoff round; 21 is the Pro Bowl week
PLAYOFF_ROUND_WEEKS: dict[PlayoffRound, int] = {
    PlayoffRound.wildcard: 18,
    PlayoffRound.divisional: 19,
    PlayoffRound.conference: 20,
    PlayoffRound.superbowl: 22,
}

FIRST_PLAYOFF_WEEK = 18
LAST_PLAYOFF_WEEK = 22

SEEDS_PER_CONFERENCE = 7
