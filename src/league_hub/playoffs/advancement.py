"""
Bracket advancement from playoff game results.

Reseeding rules:
- Divisional: once all three wild card games of a conference are final,
  the 1 seed hosts the lowest remaining seed (`{conf}-div-1`) and the
  other two winners meet in `{conf}-div-2`, better seed at home.
- Conference championship: the better remaining seed hosts.
- Super Bowl: the AFC champion takes the home slot, the NFC champion
  the away slot.

A matchup is only marked played when a final game between exactly its
two teams is found in the round's week.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.models import BracketMatchup, Game, PlayoffPicture, PlayoffTeam
from ..core.types import (
    FIRST_PLAYOFF_WEEK,
    LAST_PLAYOFF_WEEK,
    PLAYOFF_ROUND_WEEKS,
    Conference,
    PlayoffRound,
)

logger = logging.getLogger(__name__)


def is_playoff_game(game: Game) -> bool:
    return FIRST_PLAYOFF_WEEK <= game.weekIndex <= LAST_PLAYOFF_WEEK


def _find_game(matchup: BracketMatchup, games: list[Game]) -> Optional[Game]:
    if matchup.home_team is None or matchup.away_team is None:
        return None
    week = PLAYOFF_ROUND_WEEKS[matchup.round]
    pair = {matchup.home_team.team_id, matchup.away_team.team_id}
    for game in games:
        if game.weekIndex == week and {game.homeTeamId, game.awayTeamId} == pair:
            return game
    return None


def apply_result(matchup: BracketMatchup, games: list[Game]) -> BracketMatchup:
    """Return the matchup with scores and winner set if its game is final."""
    game = _find_game(matchup, games)
    if game is None or game.winner_team_id is None:
        return matchup

    home, away = matchup.home_team, matchup.away_team
    if game.homeTeamId == home.team_id:
        home_score, away_score = game.homeScore, game.awayScore
    else:
        home_score, away_score = game.awayScore, game.homeScore

    winner = home if game.winner_team_id == home.team_id else away
    return matchup.model_copy(
        update={
            "winner": winner,
            "home_score": home_score,
            "away_score": away_score,
            "is_played": True,
        }
    )


def _winners(matchups: list[BracketMatchup]) -> Optional[list[PlayoffTeam]]:
    """Winners ordered by seed, or None until every matchup is played."""
    if not all(m.is_played and m.winner is not None for m in matchups):
        return None
    return sorted((m.winner for m in matchups), key=lambda team: team.seed)


def advance_bracket(
    picture: PlayoffPicture,
    games: Iterable[Game],
    season_index: Optional[int] = None,
) -> PlayoffPicture:
    """Fill later rounds of a bracket from final playoff games.

    Args:
        picture: Bracket as built by PlayoffSeeder (not modified)
        games: Schedule rows; non-playoff weeks are ignored
        season_index: If provided, only games from this season are used

    Returns:
        New PlayoffPicture with results and advancing teams applied
    """
    if not picture.matchups:
        return picture

    playoff_games = [
        g
        for g in games
        if is_playoff_game(g) and (season_index is None or g.seasonIndex == season_index)
    ]
    bracket = {m.id: m for m in picture.matchups}
    champions: dict[Conference, PlayoffTeam] = {}

    for conference in Conference:
        prefix = conference.value.lower()

        wild_card_ids = [f"{prefix}-wc-{n}" for n in (1, 2, 3)]
        for matchup_id in wild_card_ids:
            bracket[matchup_id] = apply_result(bracket[matchup_id], playoff_games)

        survivors = _winners([bracket[i] for i in wild_card_ids])
        if survivors is None:
            continue

        bracket[f"{prefix}-div-1"] = apply_result(
            bracket[f"{prefix}-div-1"].model_copy(update={"away_team": survivors[-1]}),
            playoff_games,
        )
        bracket[f"{prefix}-div-2"] = apply_result(
            bracket[f"{prefix}-div-2"].model_copy(
                update={"home_team": survivors[0], "away_team": survivors[1]}
            ),
            playoff_games,
        )

        finalists = _winners([bracket[f"{prefix}-div-1"], bracket[f"{prefix}-div-2"]])
        if finalists is None:
            continue

        championship = apply_result(
            bracket[f"{prefix}-championship"].model_copy(
                update={"home_team": finalists[0], "away_team": finalists[1]}
            ),
            playoff_games,
        )
        bracket[championship.id] = championship
        if championship.is_played:
            champions[conference] = championship.winner

    if len(champions) == len(Conference):
        bracket["superbowl"] = apply_result(
            bracket["superbowl"].model_copy(
                update={
                    "home_team": champions[Conference.AFC],
                    "away_team": champions[Conference.NFC],
                }
            ),
            playoff_games,
        )

    played = sum(1 for m in bracket.values() if m.is_played)
    logger.debug(
        "Applied %d playoff games to league %s bracket (%d matchups final)",
        len(playoff_games),
        picture.league_id,
        played,
    )

    return picture.model_copy(update={"matchups": [bracket[m.id] for m in picture.matchups]})
