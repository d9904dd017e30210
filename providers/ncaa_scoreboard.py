# providers/ncaa_scoreboard.py
# Fetch NCAA D1 basketball results from the public casablanca scoreboard JSON.
# Team names come back as SEO slugs ("north-carolina-st"), the same format
# TeamNameCanonicalizer produces. If the feed is down or changes shape this
# returns [] rather than crashing.

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://data.ncaa.com/casablanca/scoreboard"
GENDERS = ("men", "women")


def scoreboard_url(target_date: date, gender: str = "men",
                   base_url: str = DEFAULT_BASE_URL) -> str:
    """e.g. .../basketball-men/d1/2025/03/21/scoreboard.json"""
    if gender not in GENDERS:
        raise ValueError(f"gender must be one of {GENDERS}, got {gender!r}")
    return (
        f"{base_url.rstrip('/')}/basketball-{gender}/d1/"
        f"{target_date:%Y/%m/%d}/scoreboard.json"
    )


def _score(side: Dict[str, Any]):
    raw = side.get("score")
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def normalize_scoreboard(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Flatten the scoreboard payload into dicts like:
      {
        "game_id": "6384915",
        "home": "north-carolina-st", "away": "texas-am",
        "home_score": 70, "away_score": 64,
        "status": "FINAL",
        "start_date": "03-21-2025",
        "winner": "north-carolina-st", "loser": "texas-am"
      }
    winner/loser are None until the feed flags a winner.
    """
    out: List[Dict[str, Any]] = []
    for item in payload.get("games") or []:
        try:
            game = item["game"]
            home = game["home"]
            away = game["away"]
            home_seo = home["names"]["seo"]
            away_seo = away["names"]["seo"]
        except (KeyError, TypeError):
            continue

        winner = loser = None
        if home.get("winner"):
            winner, loser = home_seo, away_seo
        elif away.get("winner"):
            winner, loser = away_seo, home_seo

        out.append({
            "game_id": str(game.get("gameID", "")),
            "home": home_seo,
            "away": away_seo,
            "home_score": _score(home),
            "away_score": _score(away),
            "status": game.get("currentPeriod") or game.get("gameState"),
            "start_date": game.get("startDate"),
            "winner": winner,
            "loser": loser,
        })
    return out


def fetch_scoreboard(target_date: date, gender: str = "men",
                     base_url: str = DEFAULT_BASE_URL,
                     timeout: float = 10) -> List[Dict[str, Any]]:
    """Fetch and normalize one day's games. Returns [] on any fetch error."""
    url = scoreboard_url(target_date, gender, base_url)
    logger.info("Fetching NCAA %s games for %s: %s", gender, target_date, url)

    try:
        with httpx.Client(timeout=timeout) as client:
            resp = client.get(url)
            resp.raise_for_status()
            data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("NCAA scoreboard fetch failed for %s: %s", url, exc)
        return []

    if not isinstance(data, dict):
        return []
    return normalize_scoreboard(data)
