"""
Weekly schedule view.

Week numbers are 1-based (weekIndex + 1). Regular season weeks are 1-18;
19, 20, 21 and 23 are the playoff rounds and 22 is the Pro Bowl week,
which has no label.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .core.models import Game, Team
from .core.types import GameResult
from .formatting import is_labeled_week, week_label


def schedule_weeks(games: Iterable[Game]) -> list[int]:
    """Sorted 1-based week numbers that have at least one game."""
    return sorted({game.weekIndex + 1 for game in games})


def _team_summary(team_id: int, team_map: dict[int, Team]) -> dict[str, Any]:
    team = team_map.get(team_id)
    return {
        "teamId": team_id,
        "name": team.label if team else str(team_id),
        "abbr": team.teamAbbr if team else None,
    }


def game_row(game: Game, team_map: dict[int, Team]) -> dict[str, Any]:
    played = game.gameStatus != GameResult.NOT_PLAYED
    return {
        "scheduleId": game.scheduleId,
        "weekIndex": game.weekIndex,
        "home": _team_summary(game.homeTeamId, team_map),
        "away": _team_summary(game.awayTeamId, team_map),
        "homeScore": game.homeScore if played else None,
        "awayScore": game.awayScore if played else None,
        "isPlayed": played,
        "winnerTeamId": game.winner_team_id,
    }


def week_schedule(
    games: Iterable[Game],
    teams: Iterable[Team],
    week: Optional[int] = None,
) -> dict[str, Any]:
    """Games of one week ordered by scheduleId.

    Args:
        games: Schedule rows
        teams: Teams used for names and abbreviations
        week: 1-based week number; the latest week with games when None

    Returns:
        Week number and label, every labeled week with games, and game rows

    Raises:
        ValueError: If the week has no label (outside 1-23, or the Pro Bowl week)
    """
    games = list(games)
    team_map = {team.teamId: team for team in teams}
    weeks = schedule_weeks(games)

    if week is None:
        if not weeks:
            return {"week": None, "label": None, "weeks": [], "games": []}
        week = weeks[-1]

    label = week_label(week)
    rows = sorted((g for g in games if g.weekIndex == week - 1), key=lambda g: g.scheduleId)
    return {
        "week": week,
        "label": label,
        "weeks": [{"week": w, "label": week_label(w)} for w in weeks if is_labeled_week(w)],
        "games": [game_row(game, team_map) for game in rows],
    }
