"""
Playoff seeding and bracket construction.

Seeds are the first seven standings rows of each conference by `rank`
(computed upstream). The bracket is the fixed 13-matchup skeleton:
six wild card games, four divisional, two conference championships and
the Super Bowl. Only wild card games and the seed-1 divisional hosts are
known up front; every other slot is filled later by
`playoffs.advancement.advance_bracket`.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.models import BracketMatchup, PlayoffPicture, PlayoffTeam, Standing, Team
from ..core.types import SEEDS_PER_CONFERENCE, Conference, PlayoffRound

logger = logging.getLogger(__name__)

# (home seed, away seed) for wild card games, in matchup id order
WILD_CARD_PAIRINGS: tuple[tuple[int, int], ...] = ((2, 7), (3, 6), (4, 5))


def _rank_key(standing: Standing) -> tuple[bool, int]:
    # Unranked rows sort last
    return (standing.rank is None, standing.rank or 0)


class PlayoffSeeder:
    """Derive playoff seeds and the bracket skeleton from standings."""

    @staticmethod
    def seed_conference(
        conference: Conference,
        standings: Iterable[Standing],
        team_map: dict[int, Team],
    ) -> list[PlayoffTeam]:
        """Seed one conference.

        Seeds are assigned by position before teams are resolved, so a row
        whose team is missing leaves a gap rather than promoting the rows
        below it.

        Args:
            conference: Conference to seed
            standings: All standings rows (any order, not modified)
            team_map: Teams keyed by teamId

        Returns:
            Resolved PlayoffTeams ordered by seed
        """
        rows = sorted(
            (s for s in standings if Conference.match(s.conferenceName) == conference),
            key=_rank_key,
        )[:SEEDS_PER_CONFERENCE]

        seeds = []
        for index, standing in enumerate(rows):
            team = team_map.get(standing.teamId)
            if team is None:
                logger.warning(
                    "Dropping %s seed %d: no team with teamId %s",
                    conference.value,
                    index + 1,
                    standing.teamId,
                )
                continue
            seeds.append(
                PlayoffTeam(
                    team=team,
                    standing=standing,
                    seed=index + 1,
                    conference=conference,
                    division=standing.divisionName or "Unknown",
                )
            )
        return seeds

    @staticmethod
    def wild_card_matchups(conference: Conference, seeds: list[PlayoffTeam]) -> list[BracketMatchup]:
        by_seed = {team.seed: team for team in seeds}
        prefix = conference.value.lower()
        return [
            BracketMatchup(
                id=f"{prefix}-wc-{number}",
                round=PlayoffRound.wildcard,
                conference=conference,
                home_team=by_seed[home],
                away_team=by_seed[away],
            )
            for number, (home, away) in enumerate(WILD_CARD_PAIRINGS, start=1)
        ]

    @staticmethod
    def build_bracket(afc_seeds: list[PlayoffTeam], nfc_seeds: list[PlayoffTeam]) -> list[BracketMatchup]:
        """Build all 13 matchups, or none unless both conferences have a full field."""
        if len(afc_seeds) < SEEDS_PER_CONFERENCE or len(nfc_seeds) < SEEDS_PER_CONFERENCE:
            return []

        seeds = {Conference.AFC: afc_seeds, Conference.NFC: nfc_seeds}
        matchups: list[BracketMatchup] = []

        for conference in Conference:
            matchups.extend(PlayoffSeeder.wild_card_matchups(conference, seeds[conference]))

        for conference in Conference:
            prefix = conference.value.lower()
            matchups.append(
                BracketMatchup(
                    id=f"{prefix}-div-1",
                    round=PlayoffRound.divisional,
                    conference=conference,
                    home_team=seeds[conference][0],
                )
            )
            matchups.append(
                BracketMatchup(id=f"{prefix}-div-2", round=PlayoffRound.divisional, conference=conference)
            )

        for conference in Conference:
            matchups.append(
                BracketMatchup(
                    id=f"{conference.value.lower()}-championship",
                    round=PlayoffRound.conference,
                    conference=conference,
                )
            )

        matchups.append(BracketMatchup(id="superbowl", round=PlayoffRound.superbowl))
        return matchups

    @staticmethod
    def build(
        standings: Iterable[Standing],
        teams: Iterable[Team],
        league_id: Optional[str] = None,
    ) -> PlayoffPicture:
        """Compute seeds for both conferences and the bracket skeleton.

        Args:
            standings: All standings rows
            teams: All teams
            league_id: League the standings belong to

        Returns:
            PlayoffPicture; matchups is empty while either conference has
            fewer than seven resolved seeds
        """
        standings = list(standings)
        team_map = {team.teamId: team for team in teams}

        afc = PlayoffSeeder.seed_conference(Conference.AFC, standings, team_map)
        nfc = PlayoffSeeder.seed_conference(Conference.NFC, standings, team_map)
        matchups = PlayoffSeeder.build_bracket(afc, nfc)

        if not matchups:
            logger.info(
                "Playoff field not yet determined for league %s (AFC %d seeds, NFC %d seeds)",
                league_id,
                len(afc),
                len(nfc),
            )

        return PlayoffPicture(league_id=league_id, afc_seeds=afc, nfc_seeds=nfc, matchups=matchups)
