"""
API tests for the League Hub API.

Each test builds an app around the fixture snapshot, so no export file
or environment is needed.
"""

from __future__ import annotations

import logging

import pytest
from starlette.testclient import TestClient

from league_hub.api.main import create_app
from league_hub.snapshot import LeagueSnapshot


@pytest.fixture
def client(snapshot):
    with TestClient(create_app(snapshot=snapshot)) as c:
        yield c


def assert_error(response, status: int, code: str) -> dict:
    assert response.status_code == status
    error = response.json()["error"]
    assert error["code"] == code
    assert "message" in error
    return error


# =========================================================================
# Health endpoints
# =========================================================================


class TestHealthEndpoints:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["snapshotLoaded"] is True
        assert "timestamp" in data
        assert "X-Process-Time" in r.headers

    def test_root(self, client):
        data = client.get("/").json()
        assert data["name"] == "League Hub API"
        assert data["status"] == "running"


# =========================================================================
# Stats endpoints
# =========================================================================


class TestStatsEndpoints:
    def test_leaders_shape(self, client):
        r = client.get("/api/v1/stats/passing")
        assert r.status_code == 200
        data = r.json()

        assert data["leagueId"] == "25101040"
        assert data["category"] == "passing"
        assert data["sortKey"] == "passYds"
        assert data["count"] == 2
        assert [c["key"] for c in data["columns"]][0] == "passComp"

        top = data["lines"][0]
        assert top["rosterId"] == 1
        assert top["passYds"] == 430
        assert top["passerRating"] == pytest.approx(98.3, abs=0.05)
        assert top["games"] == 2
        assert top["player"]["name"] == "Avery Brooks"
        assert top["player"]["devTrait"] == "Superstar"
        assert top["player"]["salary"] == "$25.50M"
        assert top["team"]["teamId"] == 1

    def test_filters_and_limit(self, client):
        data = client.get("/api/v1/stats/passing", params={"team_id": 11}).json()
        assert [line["rosterId"] for line in data["lines"]] == [3]

        data = client.get("/api/v1/stats/passing", params={"search": "brooks"}).json()
        assert [line["rosterId"] for line in data["lines"]] == [1]

        data = client.get("/api/v1/stats/passing", params={"limit": 1}).json()
        assert data["count"] == 1

    def test_sort_by_derived(self, client):
        data = client.get("/api/v1/stats/rushing", params={"sort": "rushYdsPerAtt"}).json()
        assert data["sortKey"] == "rushYdsPerAtt"
        assert [line["rosterId"] for line in data["lines"]] == [1, 2]

    def test_invalid_sort_key(self, client):
        r = client.get("/api/v1/stats/passing", params={"sort": "rushYds"})
        error = assert_error(r, 400, "VALIDATION_ERROR")
        assert "passYds" in error["detail"]

    def test_unknown_category(self, client):
        assert client.get("/api/v1/stats/curling").status_code == 422

    def test_empty_category(self, client):
        data = client.get("/api/v1/stats/defense").json()
        assert data["count"] == 0
        assert data["lines"] == []

    def test_responses_are_cached(self, client):
        client.get("/api/v1/stats/kicking")
        client.get("/api/v1/stats/kicking")
        stats = client.get("/health").json()["cache"]
        assert stats["hits"] >= 1
        assert stats["entries"] >= 1

    def test_player_stats(self, client):
        data = client.get("/api/v1/stats/player/1").json()

        assert data["rosterId"] == 1
        assert set(data["categories"]) == {"passing", "rushing"}
        assert data["categories"]["rushing"]["rushYds"] == 15

    def test_player_not_found(self, client):
        r = client.get("/api/v1/stats/player/404")
        error = assert_error(r, 404, "NOT_FOUND")
        assert "404" in error["detail"]


# =========================================================================
# Standings and playoffs
# =========================================================================


class TestStandingsEndpoints:
    def test_all_standings(self, client):
        data = client.get("/api/v1/standings").json()
        assert data["count"] == 16
        assert data["standings"][0]["rank"] == 1

    def test_conference_filter(self, client):
        data = client.get("/api/v1/standings", params={"conference": "AFC"}).json()
        assert data["conference"] == "AFC"
        assert [row["teamId"] for row in data["standings"]] == list(range(1, 9))
        assert data["standings"][0]["record"] == "16-1"

    def test_unknown_conference(self, client):
        assert client.get("/api/v1/standings", params={"conference": "XFL"}).status_code == 422


class TestPlayoffEndpoints:
    def test_picture(self, client):
        data = client.get("/api/v1/playoffs").json()

        assert data["determined"] is True
        assert data["leagueId"] == "25101040"
        assert len(data["afcSeeds"]) == 7
        assert len(data["matchups"]) == 13

        first = data["matchups"][0]
        assert first["id"] == "afc-wc-1"
        assert first["title"] == "Wild Card"
        assert first["homeTeam"]["seed"] == 2
        assert first["awayTeam"]["team"]["teamId"] == 7

    def test_undetermined(self, export_data):
        export_data["standings"] = export_data["standings"][:5]
        app = create_app(snapshot=LeagueSnapshot.model_validate(export_data))
        with TestClient(app) as c:
            data = c.get("/api/v1/playoffs").json()
        assert data["determined"] is False
        assert data["matchups"] == []


# =========================================================================
# Schedule endpoints
# =========================================================================


class TestScheduleEndpoints:
    def test_latest_week_by_default(self, client):
        data = client.get("/api/v1/schedule").json()

        assert data["leagueId"] == "25101040"
        assert data["week"] == 2
        assert data["label"] == "Week 2"
        assert [w["week"] for w in data["weeks"]] == [1, 2]
        assert [g["scheduleId"] for g in data["games"]] == [101]

    def test_week_param(self, client):
        data = client.get("/api/v1/schedule", params={"week": 1}).json()
        game = data["games"][0]

        assert game["scheduleId"] == 100
        assert game["home"]["abbr"] == "T1"
        assert (game["homeScore"], game["awayScore"]) == (24, 17)
        assert game["winnerTeamId"] == 1

    def test_pro_bowl_week_rejected(self, client):
        error = assert_error(client.get("/api/v1/schedule", params={"week": 22}), 400, "VALIDATION_ERROR")
        assert "22" in error["message"]


# =========================================================================
# Snapshot loading
# =========================================================================


class TestSnapshotLoading:
    def test_loads_configured_export(self, export_file, monkeypatch):
        monkeypatch.setenv("LEAGUE_HUB_EXPORT_PATH", str(export_file))
        monkeypatch.setenv("LEAGUE_HUB_LEAGUE_ID", "override")

        with TestClient(create_app()) as c:
            data = c.get("/api/v1/stats/passing").json()
        assert data["leagueId"] == "override"

    def test_load_is_logged(self, export_file, monkeypatch, caplog):
        monkeypatch.setenv("LEAGUE_HUB_EXPORT_PATH", str(export_file))

        with caplog.at_level(logging.INFO, logger="league_hub.api.dependencies"):
            with TestClient(create_app()) as c:
                c.get("/api/v1/standings")
        assert f"Loading league export from {export_file}" in caplog.text

    def test_missing_export_is_503(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LEAGUE_HUB_EXPORT_PATH", str(tmp_path / "missing.json"))

        with TestClient(create_app()) as c:
            r = c.get("/api/v1/standings")
        assert_error(r, 503, "SERVICE_UNAVAILABLE")
