"""
Display formatting for dashboard values.

Trait labels, records, contract money, season labels and playoff
week/round titles, shared by the API and the CLI.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .core.models import Player
from .core.types import (
    CoverBallTrait,
    DevTrait,
    LBStyleTrait,
    PenaltyTrait,
    PlayBallTrait,
    PlayoffRound,
    QBStyleTrait,
    REGULAR_SEASON_WEEKS,
    SensePressureTrait,
    YesNoTrait,
)

UNKNOWN = "Unknown"

# Player attribute -> trait enum
PLAYER_TRAIT_FIELDS: dict[str, type[IntEnum]] = {
    "qBStyleTrait": QBStyleTrait,
    "sensePressureTrait": SensePressureTrait,
    "throwAwayTrait": YesNoTrait,
    "tightSpiralTrait": YesNoTrait,
    "penaltyTrait": PenaltyTrait,
    "clutchTrait": YesNoTrait,
    "playBallTrait": PlayBallTrait,
    "coverBallTrait": CoverBallTrait,
    "lBStyleTrait": LBStyleTrait,
}

TRAIT_LABELS: dict[type[IntEnum], dict[int, str]] = {
    DevTrait: {
        DevTrait.NORMAL: "Normal",
        DevTrait.STAR: "Star",
        DevTrait.SUPERSTAR: "Superstar",
        DevTrait.XFACTOR: "X-Factor",
    },
    QBStyleTrait: {
        QBStyleTrait.BALANCED: "Balanced",
        QBStyleTrait.POCKET: "Pocket",
        QBStyleTrait.SCRAMBLING: "Scrambling",
    },
    SensePressureTrait: {
        SensePressureTrait.IDEAL: "Ideal",
        SensePressureTrait.AVERAGE: "Average",
        SensePressureTrait.PARANOID: "Paranoid",
        SensePressureTrait.TRIGGER_HAPPY: "Trigger Happy",
        SensePressureTrait.OBLIVIOUS: "Oblivious",
    },
    PenaltyTrait: {
        PenaltyTrait.DISCIPLINED: "Disciplined",
        PenaltyTrait.NORMAL: "Normal",
        PenaltyTrait.UNDISCIPLINED: "Undisciplined",
    },
    YesNoTrait: {
        YesNoTrait.YES: "Yes",
        YesNoTrait.NO: "No",
    },
    PlayBallTrait: {
        PlayBallTrait.AGGRESSIVE: "Aggressive",
        PlayBallTrait.BALANCED: "Balanced",
        PlayBallTrait.CONSERVATIVE: "Conservative",
    },
    CoverBallTrait: {
        CoverBallTrait.ALWAYS: "Always",
        CoverBallTrait.ON_BIG_HITS: "On Big Hits",
        CoverBallTrait.ON_MEDIUM_HITS: "On Medium Hits",
        CoverBallTrait.FOR_ALL_HITS: "For All Hits",
        CoverBallTrait.NEVER: "Never",
    },
    LBStyleTrait: {
        LBStyleTrait.BALANCED: "Balanced",
        LBStyleTrait.COVER_LB: "Cover LB",
        LBStyleTrait.PASS_RUSH: "Pass Rush",
    },
}

PLAYOFF_WEEK_LABELS: dict[int, str] = {
    19: "Wildcard Round",
    20: "Divisional Round",
    21: "Conference Championship Round",
    23: "Super Bowl",
}

ROUND_TITLES: dict[PlayoffRound, str] = {
    PlayoffRound.wildcard: "Wild Card",
    PlayoffRound.divisional: "Divisional",
    PlayoffRound.conference: "Conference Championship",
    PlayoffRound.superbowl: "Super Bowl",
}


def format_trait(trait: type[IntEnum], value: Optional[int]) -> str:
    """Label for a trait code, "Unknown" if the code is not defined."""
    if value is None:
        return UNKNOWN
    return TRAIT_LABELS.get(trait, {}).get(value, UNKNOWN)


def player_traits(player: Player) -> dict[str, str]:
    """Labels for the traits the player carries; traits not exported are left out."""
    return {
        name: format_trait(trait, getattr(player, name))
        for name, trait in PLAYER_TRAIT_FIELDS.items()
        if getattr(player, name) is not None
    }


def format_record(wins: int, losses: int, ties: int = 0) -> str:
    """W-L, or W-L-T when there are ties."""
    if not ties:
        return f"{wins}-{losses}"
    return f"{wins}-{losses}-{ties}"


def win_pct(wins: int, losses: int, ties: int = 0) -> float:
    """Winning percentage with ties counted as half a win."""
    games = wins + losses + ties
    if not games:
        return 0.0
    return round((wins + ties / 2) / games, 3)


def format_money(amount: float) -> str:
    """Contract money: $X.XXM from a million up, $XK below."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.2f}M"
    return f"${amount / 1_000:.0f}K"


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_season(years_pro: int) -> str:
    """Rookie for first-year players, otherwise "Nth Season"."""
    if years_pro == 0:
        return "Rookie"
    return f"{_ordinal(years_pro + 1)} Season"


def is_labeled_week(week: int) -> bool:
    """Whether `week_label` accepts the week."""
    return 1 <= week <= REGULAR_SEASON_WEEKS or week in PLAYOFF_WEEK_LABELS


def week_label(week: int) -> str:
    """Label for a 1-based week number (19-23 are playoff rounds, 22 is skipped).

    Raises:
        ValueError: For weeks outside 1-23 and for week 22
    """
    if not is_labeled_week(week):
        raise ValueError(
            "Invalid week number. Valid weeks are week 1-18 and for playoffs: "
            "Wildcard = 19, Divisional = 20, Conference Championship = 21, Super Bowl = 23"
        )
    return PLAYOFF_WEEK_LABELS.get(week, f"Week {week}")


def round_title(round_: PlayoffRound | str) -> str:
    try:
        return ROUND_TITLES[PlayoffRound(round_)]
    except ValueError:
        return str(round_)
