"""
Pytest configuration for league-hub tests.

Fixtures build a small league: 8 AFC and 8 NFC teams with standings
ranked 1-8 inside each conference, a handful of players, per-game stat
entries and a playoff schedule.
"""

import json

import pytest

from league_hub.core.config import get_settings
from league_hub.core.models import Game, Player, Standing, Team
from league_hub.core.types import GameResult
from league_hub.snapshot import LeagueSnapshot

AFC_TEAM_IDS = list(range(1, 9))
NFC_TEAM_IDS = list(range(11, 19))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are lru_cached; reset around every test so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_team(team_id: int, conference: str) -> Team:
    return Team(
        teamId=team_id,
        teamName=f"Team {team_id}",
        teamAbbr=f"T{team_id}",
        cityName=f"City {team_id}",
        displayName=f"City {team_id} Team {team_id}",
        confName=conference,
        divName=f"{conference} North",
    )


def make_standing(team_id: int, conference: str, rank: int) -> Standing:
    wins = 17 - rank
    return Standing(
        teamId=team_id,
        teamName=f"Team {team_id}",
        teamAbbr=f"T{team_id}",
        wins=wins,
        losses=17 - wins,
        rank=rank,
        conferenceName=conference,
        divisonName=f"{conference} North",
        ptsFor=400 - rank * 10,
        ptsAgainst=300,
        netPts=100 - rank * 10,
    )


@pytest.fixture
def teams():
    return [make_team(t, "AFC") for t in AFC_TEAM_IDS] + [make_team(t, "NFC") for t in NFC_TEAM_IDS]


@pytest.fixture
def standings():
    """Standings ranked 1-8 per conference, deliberately out of rank order."""
    rows = [make_standing(t, "AFC", rank) for rank, t in enumerate(AFC_TEAM_IDS, start=1)]
    rows += [make_standing(t, "NFC", rank) for rank, t in enumerate(NFC_TEAM_IDS, start=1)]
    return list(reversed(rows))


@pytest.fixture
def players():
    return [
        Player(
            rosterId=1,
            firstName="Avery",
            lastName="Brooks",
            position="QB",
            teamId=1,
            yearsPro=4,
            devTrait=2,
            contractSalary=25_500_000,
            qBStyleTrait=1,
            throwAwayTrait=0,
        ),
        Player(rosterId=2, firstName="Cam", lastName="Dalton", position="HB", teamId=1),
        Player(rosterId=3, firstName="Eli", lastName="Fontaine", position="QB", teamId=11, yearsPro=1),
        Player(rosterId=4, firstName="Gus", lastName="Hale", position="K", teamId=11),
        Player(rosterId=5, firstName="Ira", lastName="Jett", position="WR", teamId=2),
    ]


@pytest.fixture
def passing_entries():
    return [
        {"rosterId": 1, "scheduleId": 100, "weekIndex": 0, "passComp": 20, "passAtt": 30,
         "passYds": 250, "passTDs": 2, "passInts": 1},
        {"rosterId": 1, "scheduleId": 101, "weekIndex": 1, "passComp": 15, "passAtt": 25,
         "passYds": 180, "passTDs": 1, "passInts": 0},
        {"rosterId": 3, "scheduleId": 102, "weekIndex": 0, "passComp": 22, "passAtt": 35,
         "passYds": 310, "passTDs": 3, "passInts": 2},
    ]


@pytest.fixture
def raw_stats(passing_entries):
    return {
        "passing": passing_entries,
        "MADDEN_RUSHING_STAT": [
            {"rosterId": 2, "scheduleId": 100, "rushAtt": 18, "rushYds": 92, "rushTDs": 1, "rushFum": 0},
            {"rosterId": 2, "scheduleId": 101, "rushAtt": 12, "rushYds": 40, "rushTDs": 0},
            {"rosterId": 1, "scheduleId": 100, "rushAtt": 3, "rushYds": 15},
        ],
        "receiving": [
            {"rosterId": 5, "scheduleId": 100, "recCatches": 6, "recYds": 88, "recTDs": 1},
        ],
        "kicking": [
            {"rosterId": 4, "scheduleId": 102, "fGMade": 2, "fGAtt": 3, "fGLongest": 47,
             "xPMade": 3, "xPAtt": 3, "kickPts": 9},
            {"rosterId": 4, "scheduleId": 103, "fGMade": 1, "fGAtt": 1, "fGLongest": 52,
             "xPMade": 2, "xPAtt": 2, "kickPts": 5},
        ],
    }


def _game(schedule_id, week, home, away, home_score=0, away_score=0, status=GameResult.NOT_PLAYED):
    return {
        "scheduleId": schedule_id,
        "weekIndex": week,
        "seasonIndex": 0,
        "homeTeamId": home,
        "awayTeamId": away,
        "homeScore": home_score,
        "awayScore": away_score,
        "gameStatus": int(status),
    }


@pytest.fixture
def wild_card_games():
    """Home teams win every wild card game (seeds 2, 3, 4 advance)."""
    games = []
    for offset, team_ids in enumerate((AFC_TEAM_IDS, NFC_TEAM_IDS)):
        for n, (home_seed, away_seed) in enumerate(((2, 7), (3, 6), (4, 5)), start=1):
            games.append(
                _game(
                    500 + offset * 10 + n,
                    18,
                    team_ids[home_seed - 1],
                    team_ids[away_seed - 1],
                    27,
                    20,
                    GameResult.HOME_WIN,
                )
            )
    return [Game.model_validate(g) for g in games]


@pytest.fixture
def game_factory():
    def factory(*args, **kwargs) -> Game:
        return Game.model_validate(_game(*args, **kwargs))

    return factory


@pytest.fixture
def export_data(players, teams, standings, raw_stats):
    return {
        "leagueId": 25101040,
        "players": [p.model_dump() for p in players],
        "teams": [t.model_dump() for t in teams],
        "standings": [s.model_dump() for s in standings],
        "schedules": [
            _game(100, 0, 1, 2, 24, 17, GameResult.HOME_WIN),
            _game(101, 1, 11, 1, 10, 13, GameResult.AWAY_WIN),
        ],
        "stats": raw_stats,
    }


@pytest.fixture
def snapshot(export_data):
    return LeagueSnapshot.model_validate(export_data)


@pytest.fixture
def export_file(tmp_path, export_data):
    path = tmp_path / "league_export.json"
    path.write_text(json.dumps(export_data), encoding="utf-8")
    return path
