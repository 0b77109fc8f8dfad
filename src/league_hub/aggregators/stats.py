"""
Player statistics aggregator.

Handles aggregation of game-by-game stat entries into season lines.
The game export stores one record per player per game per category,
which need to be summed into season totals for the stats tables.

Derived rate stats (passer rating, yards per carry, ...) are always
computed from the summed totals, never averaged across games.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.errors import InvalidStatEntryError
from ..core.models import (
    STAT_ENTRY_MODELS,
    AggregatedStatLine,
    BaseStatEntry,
    Number,
    Player,
    Team,
    parse_stat_entry,
)
from ..core.types import StatCategory

logger = logging.getLogger(__name__)

# Each passer rating component is bounded to [0, 2.375]
PASSER_RATING_COMPONENT_MAX = 2.375

# Rate stats each category can produce
DERIVED_FIELDS: dict[StatCategory, tuple[str, ...]] = {
    StatCategory.passing: ("passerRating", "passCompPct", "passYdsPerAtt"),
    StatCategory.rushing: ("rushYdsPerAtt",),
    StatCategory.receiving: ("recYdsPerCatch",),
    StatCategory.defense: (),
    StatCategory.kicking: ("fGPct",),
    StatCategory.punting: ("puntYdsPerAtt", "puntNetYdsPerAtt"),
}


def _ratio(numerator: Optional[Number], denominator: Optional[Number]) -> Optional[float]:
    """numerator / denominator, or None when either side is missing or the denominator is zero."""
    if numerator is None or not denominator:
        return None
    return numerator / denominator


def _clamp(value: float) -> float:
    return max(0.0, min(PASSER_RATING_COMPONENT_MAX, value))


def passer_rating(
    completions: Optional[Number],
    attempts: Optional[Number],
    yards: Optional[Number],
    touchdowns: Optional[Number],
    interceptions: Optional[Number],
) -> Optional[float]:
    """Calculate the NFL passer rating.

    Args:
        completions: Completed passes
        attempts: Pass attempts
        yards: Passing yards
        touchdowns: Passing touchdowns
        interceptions: Interceptions thrown

    Returns:
        Rating in [0, 158.3] rounded to one decimal, or None with no attempts
        or when any other input is missing
    """
    if not attempts or None in (completions, yards, touchdowns, interceptions):
        return None

    completion = _clamp((completions / attempts - 0.3) * 5)
    per_attempt = _clamp((yards / attempts - 3) * 0.25)
    touchdown = _clamp(touchdowns / attempts * 20)
    interception = _clamp(PASSER_RATING_COMPONENT_MAX - interceptions / attempts * 25)

    return round((completion + per_attempt + touchdown + interception) / 6 * 100, 1)


def _rounded(value: Optional[float], scale: float = 1.0) -> Optional[float]:
    if value is None:
        return None
    return round(value * scale, 1)


def derive_stats(category: StatCategory, totals: Mapping[str, Number]) -> dict[str, float]:
    """Compute rate stats for a category from season totals.

    A field is omitted when its denominator is zero or missing, or when any
    total it is computed from is missing.

    Args:
        category: Stat category of the totals
        totals: Summed counting fields

    Returns:
        Mapping of derived field name to value
    """
    derived: dict[str, Optional[float]] = {}

    if category == StatCategory.passing:
        att = totals.get("passAtt")
        derived["passerRating"] = passer_rating(
            totals.get("passComp"),
            att,
            totals.get("passYds"),
            totals.get("passTDs"),
            totals.get("passInts"),
        )
        derived["passCompPct"] = _rounded(_ratio(totals.get("passComp"), att), 100)
        derived["passYdsPerAtt"] = _rounded(_ratio(totals.get("passYds"), att))

    elif category == StatCategory.rushing:
        derived["rushYdsPerAtt"] = _rounded(_ratio(totals.get("rushYds"), totals.get("rushAtt")))

    elif category == StatCategory.receiving:
        derived["recYdsPerCatch"] = _rounded(
            _ratio(totals.get("recYds"), totals.get("recCatches"))
        )

    elif category == StatCategory.kicking:
        derived["fGPct"] = _rounded(_ratio(totals.get("fGMade"), totals.get("fGAtt")), 100)

    elif category == StatCategory.punting:
        att = totals.get("puntAtt")
        derived["puntYdsPerAtt"] = _rounded(_ratio(totals.get("puntYds"), att))
        # Net average only when net yards were tracked
        if "puntNetYds" in totals:
            derived["puntNetYdsPerAtt"] = _rounded(_ratio(totals.get("puntNetYds"), att))

    return {key: value for key, value in derived.items() if value is not None}


class StatAggregator:
    """Aggregate per-game stat entries into one season line per player per category."""

    @staticmethod
    def coerce_entries(
        category: StatCategory, entries: Iterable[BaseStatEntry | Mapping[str, Any]]
    ) -> list[BaseStatEntry]:
        """Parse raw mappings and check that model entries belong to the category.

        Raises:
            InvalidStatEntryError: On a missing rosterId or a category mismatch
        """
        expected = STAT_ENTRY_MODELS[category]
        coerced = []
        for entry in entries:
            if isinstance(entry, BaseStatEntry):
                if not isinstance(entry, expected):
                    raise InvalidStatEntryError(
                        f"{entry.category} entry for rosterId {entry.rosterId} "
                        f"listed under {category.value}"
                    )
                coerced.append(entry)
            else:
                coerced.append(parse_stat_entry(category, dict(entry)))
        return coerced

    @staticmethod
    def group_by_player(entries: Iterable[BaseStatEntry]) -> dict[int, list[BaseStatEntry]]:
        """Partition entries by rosterId, preserving input order within a player."""
        grouped: dict[int, list[BaseStatEntry]] = {}
        for entry in entries:
            grouped.setdefault(entry.rosterId, []).append(entry)
        return grouped

    @staticmethod
    def sum_entries(entries: Sequence[BaseStatEntry]) -> dict[str, Number]:
        """Sum counting fields and max-combine the others across one player's entries.

        A field is present in the result only if at least one entry carried it.
        """
        if not entries:
            return {}

        model = type(entries[0])
        totals: dict[str, Number] = {}

        for name in model.COUNTING_FIELDS:
            values = [getattr(e, name) for e in entries if getattr(e, name) is not None]
            if values:
                totals[name] = sum(values)

        for name in model.MAX_FIELDS:
            values = [getattr(e, name) for e in entries if getattr(e, name) is not None]
            if values:
                totals[name] = max(values)

        return totals

    @staticmethod
    def aggregate_category(
        category: str | StatCategory,
        entries: Iterable[BaseStatEntry | Mapping[str, Any]],
        players: Optional[Iterable[Player]] = None,
        teams: Optional[Iterable[Team]] = None,
        league_id: Optional[str] = None,
    ) -> list[AggregatedStatLine]:
        """Aggregate one category's entries into season lines.

        Args:
            category: Stat category (enum, name, or export tag)
            entries: Stat entries or raw export mappings for that category
            players: Optional roster used to attach Player records
            teams: Optional teams used to attach the player's Team
            league_id: League the entries belong to

        Returns:
            One AggregatedStatLine per rosterId, ordered by rosterId
        """
        category = StatCategory.parse(category)
        parsed = StatAggregator.coerce_entries(category, entries)
        grouped = StatAggregator.group_by_player(parsed)

        player_map = {p.rosterId: p for p in players or ()}
        team_map = {t.teamId: t for t in teams or ()}

        lines = []
        for roster_id in sorted(grouped):
            player_entries = grouped[roster_id]
            totals = StatAggregator.sum_entries(player_entries)
            player = player_map.get(roster_id)
            team = team_map.get(player.teamId) if player else None

            lines.append(
                AggregatedStatLine(
                    roster_id=roster_id,
                    category=category,
                    league_id=league_id,
                    games=len(player_entries),
                    totals=totals,
                    derived=derive_stats(category, totals),
                    player=player,
                    team=team,
                )
            )

        if players is not None:
            unknown = sum(1 for line in lines if line.player is None)
            if unknown:
                logger.debug(
                    "%d %s lines have no matching roster entry (league %s)",
                    unknown,
                    category.value,
                    league_id,
                )

        logger.debug(
            "Aggregated %d %s entries into %d lines", len(parsed), category.value, len(lines)
        )
        return lines

    @staticmethod
    def aggregate(
        entries_by_category: Mapping[str | StatCategory, Iterable[BaseStatEntry | Mapping[str, Any]]],
        players: Optional[Iterable[Player]] = None,
        teams: Optional[Iterable[Team]] = None,
        league_id: Optional[str] = None,
    ) -> dict[StatCategory, list[AggregatedStatLine]]:
        """Aggregate every supplied category.

        Categories that are not supplied, or supplied with no entries, map to
        an empty list.

        Returns:
            Mapping of category to its season lines
        """
        players = list(players) if players is not None else None
        teams = list(teams) if teams is not None else None

        # A category may be supplied under both its name and its export tag
        merged: dict[StatCategory, list[BaseStatEntry | Mapping[str, Any]]] = {}
        for key, entries in entries_by_category.items():
            merged.setdefault(StatCategory.parse(key), []).extend(entries)

        result: dict[StatCategory, list[AggregatedStatLine]] = {c: [] for c in StatCategory}
        for category, entries in merged.items():
            result[category] = StatAggregator.aggregate_category(
                category, entries, players=players, teams=teams, league_id=league_id
            )
        return result
