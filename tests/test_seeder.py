"""
Tests for playoff seeding and bracket construction.
"""

import logging

from league_hub.core.models import Standing
from league_hub.core.types import Conference, PlayoffRound
from league_hub.playoffs import PlayoffSeeder

EXPECTED_IDS = [
    "afc-wc-1",
    "afc-wc-2",
    "afc-wc-3",
    "nfc-wc-1",
    "nfc-wc-2",
    "nfc-wc-3",
    "afc-div-1",
    "afc-div-2",
    "nfc-div-1",
    "nfc-div-2",
    "afc-championship",
    "nfc-championship",
    "superbowl",
]


class TestSeedConference:
    def test_top_seven_by_rank(self, standings, teams):
        team_map = {t.teamId: t for t in teams}
        seeds = PlayoffSeeder.seed_conference(Conference.AFC, standings, team_map)

        assert [s.seed for s in seeds] == [1, 2, 3, 4, 5, 6, 7]
        assert [s.team_id for s in seeds] == [1, 2, 3, 4, 5, 6, 7]
        assert all(s.conference == Conference.AFC for s in seeds)
        assert seeds[0].division == "AFC North"

    def test_conference_match_is_case_insensitive(self, standings, teams):
        lowered = [s.model_copy(update={"conferenceName": s.conferenceName.lower()}) for s in standings]
        seeds = PlayoffSeeder.seed_conference(
            Conference.NFC, lowered, {t.teamId: t for t in teams}
        )
        assert [s.team_id for s in seeds] == [11, 12, 13, 14, 15, 16, 17]

    def test_missing_division_is_unknown(self, teams):
        rows = [Standing(teamId=1, rank=1, conferenceName="AFC")]
        seeds = PlayoffSeeder.seed_conference(Conference.AFC, rows, {t.teamId: t for t in teams})
        assert seeds[0].division == "Unknown"

    def test_unresolved_team_leaves_gap(self, standings, teams, caplog):
        team_map = {t.teamId: t for t in teams if t.teamId != 3}

        with caplog.at_level(logging.WARNING, logger="league_hub.playoffs.seeder"):
            seeds = PlayoffSeeder.seed_conference(Conference.AFC, standings, team_map)

        assert [s.seed for s in seeds] == [1, 2, 4, 5, 6, 7]
        assert 8 not in [s.team_id for s in seeds]
        assert "teamId 3" in caplog.text


class TestBuild:
    def test_full_bracket_has_thirteen_matchups(self, standings, teams):
        picture = PlayoffSeeder.build(standings, teams, league_id="1")

        assert picture.is_determined
        assert [m.id for m in picture.matchups] == EXPECTED_IDS
        assert len(picture.afc_seeds) == 7
        assert len(picture.nfc_seeds) == 7

    def test_round_counts(self, standings, teams):
        matchups = PlayoffSeeder.build(standings, teams).matchups
        rounds = [m.round for m in matchups]

        assert rounds.count(PlayoffRound.wildcard) == 6
        assert rounds.count(PlayoffRound.divisional) == 4
        assert rounds.count(PlayoffRound.conference) == 2
        assert rounds.count(PlayoffRound.superbowl) == 1

    def test_wild_card_pairings(self, standings, teams):
        picture = PlayoffSeeder.build(standings, teams)

        pairs = [
            (m.home_team.seed, m.away_team.seed)
            for m in picture.matchups
            if m.round == PlayoffRound.wildcard
        ]
        assert pairs == [(2, 7), (3, 6), (4, 5)] * 2
        assert picture.matchup("nfc-wc-3").home_team.team_id == 14
        assert picture.matchup("nfc-wc-3").away_team.team_id == 15

    def test_top_seed_has_bye(self, standings, teams):
        picture = PlayoffSeeder.build(standings, teams)

        for conference in ("afc", "nfc"):
            top = picture.matchup(f"{conference}-div-1")
            assert top.home_team.seed == 1
            assert top.away_team is None

            wild_card_teams = {
                team.team_id
                for m in picture.matchups
                if m.id.startswith(f"{conference}-wc")
                for team in (m.home_team, m.away_team)
            }
            assert top.home_team.team_id not in wild_card_teams

    def test_later_rounds_undetermined(self, standings, teams):
        picture = PlayoffSeeder.build(standings, teams)

        for matchup_id in ("afc-div-2", "nfc-div-2", "afc-championship", "nfc-championship", "superbowl"):
            matchup = picture.matchup(matchup_id)
            assert matchup.home_team is None
            assert matchup.away_team is None
            assert not matchup.is_played
        assert picture.matchup("superbowl").conference is None

    def test_idempotent(self, standings, teams):
        assert PlayoffSeeder.build(standings, teams) == PlayoffSeeder.build(standings, teams)

    def test_does_not_reorder_input(self, standings, teams):
        before = [s.teamId for s in standings]
        PlayoffSeeder.build(standings, teams)
        assert [s.teamId for s in standings] == before

    def test_six_team_conference_gives_empty_bracket(self, standings, teams, caplog):
        short = [s for s in standings if not (s.conferenceName == "NFC" and s.rank >= 7)]

        with caplog.at_level(logging.INFO, logger="league_hub.playoffs.seeder"):
            picture = PlayoffSeeder.build(short, teams, league_id="1")

        assert picture.matchups == []
        assert not picture.is_determined
        assert len(picture.afc_seeds) == 7
        assert len(picture.nfc_seeds) == 6
        assert "not yet determined" in caplog.text

    def test_unresolved_seed_empties_bracket(self, standings, teams):
        picture = PlayoffSeeder.build(standings, [t for t in teams if t.teamId != 12])

        assert picture.matchups == []
        assert [s.seed for s in picture.nfc_seeds] == [1, 3, 4, 5, 6, 7]

    def test_unranked_rows_sort_last(self, standings, teams):
        unranked = [s.model_copy(update={"rank": None}) if s.teamId == 1 else s for s in standings]
        picture = PlayoffSeeder.build(unranked, teams)

        assert picture.afc_seeds[0].team_id == 2
        assert 1 not in [s.team_id for s in picture.afc_seeds]

    def test_serializes_camel_case(self, standings, teams):
        data = PlayoffSeeder.build(standings, teams, league_id="9").model_dump(mode="json", by_alias=True)

        assert data["leagueId"] == "9"
        assert "afcSeeds" in data
        first = data["matchups"][0]
        assert first["homeTeam"]["seed"] == 2
        assert first["isPlayed"] is False
