# data_fetchers/results.py
# --------------------------------------------
# Pulls finished NCAA games and reconciles bracket picks against them.
# Design goals:
#  - Testable offline: update_results() accepts an optional 'data' payload.
#  - Bracket picks use our own team names; the feed uses NCAA SEO slugs.
#    Every comparison goes through TeamNameCanonicalizer, never raw strings.
# --------------------------------------------

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from flask import current_app

from providers.ncaa_scoreboard import fetch_scoreboard, normalize_scoreboard
from util.name_map import TeamNameCanonicalizer

# Normalized game entry, see providers.ncaa_scoreboard.normalize_scoreboard
GameEntry = Dict[str, Any]

WON = "won"
LOST = "lost"
PENDING = "pending"


def update_results(target_date: date, gender: str = "men",
                   data: Optional[Dict[str, Any]] = None) -> List[GameEntry]:
    """
    Return the games on target_date that already have a winner.
    If 'data' is given it is treated as a raw scoreboard payload and no
    network call is made.
    """
    if data is not None:
        games = normalize_scoreboard(data)
    else:
        cfg = current_app.config
        games = fetch_scoreboard(
            target_date,
            gender=gender,
            base_url=cfg["NCAA_SCOREBOARD_URL"],
            timeout=cfg["HTTP_TIMEOUT_SECONDS"],
        )
    return [g for g in games if g.get("winner")]


def pick_outcomes(picks: Iterable[str], games: Iterable[GameEntry],
                  canonicalizer: TeamNameCanonicalizer,
                  year=None) -> Dict[str, str]:
    """
    Map each picked team name to "won", "lost" or "pending".

    A pick is "lost" as soon as any game lists it as the loser (a team is
    out after one loss); otherwise "won" if some game lists it as winner.
    """
    winners = set()
    losers = set()
    for g in games:
        if g.get("winner"):
            winners.add(g["winner"])
        if g.get("loser"):
            losers.add(g["loser"])

    out: Dict[str, str] = {}
    for pick in picks:
        slug = canonicalizer.canonicalize(pick, year=year)
        if slug in losers:
            out[pick] = LOST
        elif slug in winners:
            out[pick] = WON
        else:
            out[pick] = PENDING
    return out
