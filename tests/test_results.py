# tests/test_results.py
# --------------------------------------------
# NCAA scoreboard normalization and pick grading (no internet required).
# --------------------------------------------

from datetime import date

import httpx
import pytest

import providers.ncaa_scoreboard as scoreboard
from data_fetchers.results import LOST, PENDING, WON, pick_outcomes, update_results
from tests.conftest import FIXTURE_FIRST_FOUR, FIXTURE_OVERRIDES
from util.name_map import TeamNameCanonicalizer

SCOREBOARD = {
    "games": [
        {"game": {
            "gameID": 6384915,
            "startDate": "03-21-2025",
            "currentPeriod": "FINAL",
            "home": {"names": {"seo": "north-carolina-st"}, "score": "70", "winner": True},
            "away": {"names": {"seo": "texas-am"}, "score": "64", "winner": False},
        }},
        {"game": {
            "gameID": 6384916,
            "startDate": "03-21-2025",
            "currentPeriod": "2nd",
            "home": {"names": {"seo": "xavier"}, "score": "41", "winner": False},
            "away": {"names": {"seo": "southern-california"}, "score": "38", "winner": False},
        }},
        {"game": {"gameID": 1, "home": {"names": {}}}},
    ]
}


@pytest.fixture
def canon():
    return TeamNameCanonicalizer(FIXTURE_OVERRIDES, FIXTURE_FIRST_FOUR)


def test_scoreboard_url():
    url = scoreboard.scoreboard_url(date(2025, 3, 21), "women")
    assert url == ("https://data.ncaa.com/casablanca/scoreboard/"
                   "basketball-women/d1/2025/03/21/scoreboard.json")


def test_scoreboard_url_rejects_unknown_gender():
    with pytest.raises(ValueError):
        scoreboard.scoreboard_url(date(2025, 3, 21), "coed")


def test_normalize_scoreboard_skips_malformed_games():
    games = scoreboard.normalize_scoreboard(SCOREBOARD)
    assert len(games) == 2
    final = games[0]
    assert final["game_id"] == "6384915"
    assert final["home_score"] == 70 and final["away_score"] == 64
    assert final["winner"] == "north-carolina-st"
    assert final["loser"] == "texas-am"
    assert games[1]["winner"] is None


def test_fetch_scoreboard_returns_empty_on_http_error(monkeypatch):
    def fail(self, url, *args, **kwargs):
        raise httpx.ConnectError("no route", request=httpx.Request("GET", url))

    monkeypatch.setattr(httpx.Client, "get", fail)
    assert scoreboard.fetch_scoreboard(date(2025, 3, 21)) == []


def test_fetch_scoreboard_parses_response(monkeypatch):
    def ok(self, url, *args, **kwargs):
        return httpx.Response(200, json=SCOREBOARD, request=httpx.Request("GET", url))

    monkeypatch.setattr(httpx.Client, "get", ok)
    games = scoreboard.fetch_scoreboard(date(2025, 3, 21))
    assert [g["game_id"] for g in games] == ["6384915", "6384916"]


def test_update_results_with_injected_data(app):
    games = update_results(date(2025, 3, 21), data=SCOREBOARD)
    assert [g["winner"] for g in games] == ["north-carolina-st"]


def test_update_results_uses_configured_provider(app, monkeypatch):
    seen = {}

    def fake_fetch(target_date, gender, base_url, timeout):
        seen.update(date=target_date, gender=gender, base_url=base_url, timeout=timeout)
        return scoreboard.normalize_scoreboard(SCOREBOARD)

    import data_fetchers.results as results
    monkeypatch.setattr(results, "fetch_scoreboard", fake_fetch)

    games = update_results(date(2025, 3, 21), gender="women")
    assert len(games) == 1
    assert seen["gender"] == "women"
    assert seen["base_url"] == app.config["NCAA_SCOREBOARD_URL"]


def test_pick_outcomes(canon):
    games = scoreboard.normalize_scoreboard(SCOREBOARD)
    outcomes = pick_outcomes(["NC State", "Texas A&M", "USC", "Duke"], games, canon)
    assert outcomes == {
        "NC State": WON,
        "Texas A&M": LOST,
        "USC": PENDING,
        "Duke": PENDING,
    }


def test_loss_outweighs_earlier_win(canon):
    games = [
        {"winner": "duke", "loser": "vermont"},
        {"winner": "uconn", "loser": "duke"},
    ]
    assert pick_outcomes(["Duke"], games, canon) == {"Duke": LOST}


def test_pick_outcomes_resolves_first_four(canon):
    games = [{"winner": "xavier", "loser": "illinois"}]
    assert pick_outcomes(["texas_or_xavier"], games, canon, year=2025) == {
        "texas_or_xavier": WON
    }
