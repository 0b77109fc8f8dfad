"""
Standings table helpers.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .core.models import Standing, Team
from .core.types import Conference
from .formatting import format_record, win_pct


def sort_standings(standings: Iterable[Standing]) -> list[Standing]:
    """Copy of the standings ordered by rank; unranked rows last."""
    return sorted(standings, key=lambda s: (s.rank is None, s.rank or 0))


def standings_table(
    standings: Iterable[Standing],
    teams: Iterable[Team],
    conference: Optional[Conference] = None,
) -> list[dict[str, Any]]:
    """Rows for the standings table, optionally limited to one conference."""
    team_map = {t.teamId: t for t in teams}
    rows = []
    for standing in sort_standings(standings):
        if conference is not None and Conference.match(standing.conferenceName) != conference:
            continue
        team = team_map.get(standing.teamId)
        rows.append(
            {
                "rank": standing.rank,
                "teamId": standing.teamId,
                "team": team.label if team else standing.teamName,
                "teamAbbr": standing.teamAbbr or (team.teamAbbr if team else None),
                "conference": standing.conferenceName,
                "division": standing.divisionName,
                "wins": standing.wins,
                "losses": standing.losses,
                "ties": standing.ties,
                "record": format_record(standing.wins, standing.losses, standing.ties),
                "winPct": win_pct(standing.wins, standing.losses, standing.ties),
                "ptsFor": standing.ptsFor,
                "ptsAgainst": standing.ptsAgainst,
                "netPts": standing.netPts,
            }
        )
    return rows
