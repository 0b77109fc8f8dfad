"""
Stat leader tables.

Column layout and default sort key per category, plus the search /
position / team filters applied on top of aggregated season lines.
Filtering and sorting always return new lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .aggregators import DERIVED_FIELDS
from .core.models import STAT_ENTRY_MODELS, AggregatedStatLine, Player
from .core.types import DevTrait, StatCategory
from .formatting import format_money, format_season, format_trait, player_traits


@dataclass(frozen=True)
class StatTable:
    """Table layout for one stat category."""

    category: StatCategory
    title: str
    columns: tuple[tuple[str, str], ...]  # (stat key, header)
    default_sort_key: str

    @property
    def column_keys(self) -> list[str]:
        return [key for key, _ in self.columns]


STAT_TABLES: dict[StatCategory, StatTable] = {
    StatCategory.passing: StatTable(
        category=StatCategory.passing,
        title="Passing",
        columns=(
            ("passComp", "Comp"),
            ("passAtt", "Att"),
            ("passYds", "Yds"),
            ("passTDs", "TD"),
            ("passInts", "INT"),
            ("passerRating", "RTG"),
        ),
        default_sort_key="passYds",
    ),
    StatCategory.rushing: StatTable(
        category=StatCategory.rushing,
        title="Rushing",
        columns=(
            ("rushAtt", "Att"),
            ("rushYds", "Yds"),
            ("rushTDs", "TD"),
            ("rushFum", "Fum"),
            ("rushYdsPerAtt", "Avg"),
        ),
        default_sort_key="rushYds",
    ),
    StatCategory.receiving: StatTable(
        category=StatCategory.receiving,
        title="Receiving",
        columns=(
            ("recCatches", "Rec"),
            ("recYds", "Yds"),
            ("recTDs", "TD"),
            ("recDrops", "Drops"),
            ("recYdsPerCatch", "Avg"),
        ),
        default_sort_key="recYds",
    ),
    StatCategory.defense: StatTable(
        category=StatCategory.defense,
        title="Defensive",
        columns=(
            ("defTotalTackles", "Tkl"),
            ("defSacks", "Sck"),
            ("defInts", "Int"),
            ("defFumRec", "FR"),
            ("defForcedFum", "FF"),
            ("defTDs", "TD"),
            ("defDeflections", "PD"),
        ),
        default_sort_key="defTotalTackles",
    ),
    StatCategory.kicking: StatTable(
        category=StatCategory.kicking,
        title="Kicking",
        columns=(
            ("fGMade", "FGM"),
            ("fGAtt", "FGA"),
            ("fGLongest", "Lng"),
            ("xPMade", "XPM"),
            ("xPAtt", "XPA"),
            ("kickPts", "Pts"),
        ),
        default_sort_key="kickPts",
    ),
    StatCategory.punting: StatTable(
        category=StatCategory.punting,
        title="Punting",
        columns=(
            ("puntAtt", "Att"),
            ("puntYds", "Yds"),
            ("puntYdsPerAtt", "Avg"),
            ("puntNetYdsPerAtt", "Net Avg"),
            ("puntsIn20", "In 20"),
            ("puntTBs", "TB"),
        ),
        default_sort_key="puntYds",
    ),
}


def get_stat_table(category: str | StatCategory) -> StatTable:
    return STAT_TABLES[StatCategory.parse(category)]


def sortable_keys(category: str | StatCategory) -> set[str]:
    """Every stat key a season line of the category can carry."""
    category = StatCategory.parse(category)
    model = STAT_ENTRY_MODELS[category]
    return set(model.COUNTING_FIELDS + model.MAX_FIELDS + DERIVED_FIELDS[category])


def filter_lines(
    lines: Iterable[AggregatedStatLine],
    search: Optional[str] = None,
    position: Optional[str] = None,
    team_id: Optional[int] = None,
) -> list[AggregatedStatLine]:
    """Filter season lines by player name, position and team.

    Lines without a Player record never match a name, position or team filter.
    """
    needle = search.strip().lower() if search else ""
    result = []
    for line in lines:
        player = line.player
        if needle or position or team_id is not None:
            if player is None:
                continue
            if needle and not (
                needle in player.firstName.lower() or needle in player.lastName.lower()
            ):
                continue
            if position and player.position != position:
                continue
            if team_id is not None and player.teamId != team_id:
                continue
        result.append(line)
    return result


def sort_lines(
    lines: Iterable[AggregatedStatLine],
    key: str,
    descending: bool = True,
) -> list[AggregatedStatLine]:
    """Sort season lines by a stat key; missing values sort as 0."""
    return sorted(lines, key=lambda line: line.get(key) or 0, reverse=descending)


def stat_leaders(
    lines: Iterable[AggregatedStatLine],
    category: str | StatCategory,
    search: Optional[str] = None,
    position: Optional[str] = None,
    team_id: Optional[int] = None,
    sort: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[AggregatedStatLine]:
    """Filtered leader board for a category, sorted descending."""
    table = get_stat_table(category)
    filtered = filter_lines(lines, search=search, position=position, team_id=team_id)
    ordered = sort_lines(filtered, sort or table.default_sort_key)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


def player_payload(player: Player) -> dict[str, Any]:
    """Player card: identity plus formatted dev trait, experience, contract and traits."""
    return {
        "rosterId": player.rosterId,
        "name": player.full_name,
        "position": player.position,
        "teamId": player.teamId,
        "overall": player.overall,
        "devTrait": format_trait(DevTrait, player.devTrait),
        "experience": format_season(player.yearsPro),
        "salary": format_money(player.contractSalary) if player.contractSalary is not None else None,
        "capHit": format_money(player.capHit) if player.capHit is not None else None,
        "traits": player_traits(player),
    }


def line_payload(line: AggregatedStatLine) -> dict[str, Any]:
    """Flat stat row plus the player and team it belongs to."""
    team = line.team
    return {
        **line.to_row(),
        "games": line.games,
        "player": player_payload(line.player) if line.player else None,
        "team": (
            {"teamId": team.teamId, "name": team.label, "abbr": team.teamAbbr}
            if team
            else None
        ),
    }
