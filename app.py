# app.py
# -------------------------------
# Flask application entry point and CLI commands.
# Uses the app-factory pattern.
#
# Why this file exists and what it does:
#   - Creates and configures the Flask app (via create_app).
#   - Initializes the user registry database.
#   - Loads the team-name override tables once and shares them read-only.
#   - Exposes the username availability check and team slug lookups as JSON.
#   - Provides CLI helpers for the same operations plus NCAA result pulls.
# -------------------------------

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Mapping, Optional

import click
from flask import Flask, current_app, jsonify, request

from config import parse_log_level, parse_timeout
from data_fetchers.results import pick_outcomes, update_results
from errors import InvalidArgumentError, NameServiceError
from models import db
from providers.ncaa_scoreboard import GENDERS
from registry import SQLAlchemyUserRegistry
from username_check import check_username_availability
from util.name_map import TeamNameCanonicalizer

logger = logging.getLogger(__name__)


# ---------- Utilities ----------

def today_utc() -> date:
    """Return today's date in UTC as a date object (timezone-aware)."""
    return datetime.now(timezone.utc).date()


def get_canonicalizer() -> TeamNameCanonicalizer:
    return current_app.extensions["team_canonicalizer"]


def get_user_registry():
    return current_app.extensions["user_registry"]


def _username_from_payload(payload: Dict[str, Any]):
    """
    Accept both a plain body {"username": ...} and the callable envelope
    {"data": {"username": ...}}. Returns (username, wrapped).
    """
    inner = payload.get("data")
    if isinstance(inner, dict):
        return inner.get("username"), True
    return payload.get("username"), False


# ---------- App Factory ----------

def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Create and configure the Flask app:
      - Loads configuration from config.Config, then applies 'overrides'
        (tests pass a temporary database URI and fixture tables here)
      - Initializes SQLAlchemy and creates tables
      - Builds the team canonicalizer and user registry
      - Registers routes, error handlers and CLI commands
    """
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if overrides:
        app.config.update(overrides)

    # Overrides bypass Config, so check them the same way.
    app.config["LOG_LEVEL"] = parse_log_level(app.config.get("LOG_LEVEL", "INFO"))
    app.config["HTTP_TIMEOUT_SECONDS"] = parse_timeout(app.config["HTTP_TIMEOUT_SECONDS"])
    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)

    app.extensions["team_canonicalizer"] = TeamNameCanonicalizer.from_files(
        app.config["SPECIAL_NCAA_NAMES_PATH"],
        app.config.get("FIRST_FOUR_PATH"),
    )
    app.extensions["user_registry"] = SQLAlchemyUserRegistry()

    # ----- Error handling -----

    @app.errorhandler(NameServiceError)
    def handle_name_service_error(err: NameServiceError):
        return jsonify(err.to_dict()), err.http_status

    # ----- Routes -----

    @app.route("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    @app.route("/api/check-username", methods=["POST"])
    def check_username():
        """
        Body: {"username": "John Doe"} or {"data": {"username": "John Doe"}}.
        Answers {"available": bool}; 400 for unusable input, 500 when the
        registry lookup fails.
        """
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise InvalidArgumentError(
                'The function must be called with a "username" argument.')

        username, wrapped = _username_from_payload(payload)
        result = check_username_availability(username, get_user_registry())
        return jsonify({"result": result} if wrapped else result)

    @app.route("/api/teams/slug")
    def team_slug():
        """?name=NC State[&year=2025] -> NCAA SEO slug."""
        name = request.args.get("name", "")
        year = request.args.get("year", type=int)
        slug = get_canonicalizer().canonicalize(name, year=year)
        return jsonify({"name": name, "year": year, "slug": slug})

    @app.route("/api/teams/name")
    def team_name():
        """?slug=alabama-st -> bracket team key (alabama_state)."""
        slug = request.args.get("slug", "")
        return jsonify({"slug": slug, "name": get_canonicalizer().reverse(slug)})

    # Create tables once at startup (safe no-op if already exist)
    with app.app_context():
        db.create_all()

    # ----- CLI Commands -----

    @app.cli.command("check-username")
    @click.argument("username")
    def check_username_cmd(username: str):
        """
        Report whether a display name is still free.
        Usage:
            flask check-username "John Doe"
        """
        try:
            result = check_username_availability(username, get_user_registry())
        except NameServiceError as ex:
            click.echo(f"❌ {ex.code}: {ex.message}")
            return
        state = "available" if result["available"] else "taken"
        click.echo(f"{username}: {state}")

    @app.cli.command("team-slug")
    @click.argument("name")
    @click.option("--year", type=int, required=False, help="Tournament year (resolves First Four slots)")
    def team_slug_cmd(name: str, year: int | None):
        """
        Print the NCAA SEO slug for a bracket team name.
        Example:
            flask team-slug "NC State"
        """
        click.echo(get_canonicalizer().canonicalize(name, year=year))

    @app.cli.command("fetch-results")
    @click.option("--date", "date_str", required=False, help="YYYY-MM-DD (defaults to today in UTC)")
    @click.option("--gender", type=click.Choice(GENDERS), default="men", show_default=True)
    @click.option("--pick", "picks", multiple=True, help="Bracket team name to check; repeatable")
    def fetch_results_cmd(date_str: str | None, gender: str, picks):
        """
        Fetch finished NCAA games for a date and optionally grade picks.
        Example:
            flask fetch-results --date 2025-03-21 --pick "NC State" --pick Duke
        """
        target_date = today_utc() if not date_str else date.fromisoformat(date_str)
        games = update_results(target_date, gender=gender)
        click.echo(
            f"✅ {len(games)} finished {gender}'s game(s) on {target_date.isoformat()}.")
        for g in games:
            click.echo(f"   {g['winner']} def. {g['loser']}")
        if picks:
            outcomes = pick_outcomes(picks, games, get_canonicalizer(),
                                     year=target_date.year)
            for pick, outcome in outcomes.items():
                click.echo(f"   {pick}: {outcome}")

    return app


# Create the application instance at module level for Gunicorn/production
application = create_app()


# ---------- Dev Server ----------

if __name__ == "__main__":
    app = create_app()
    # Use debug=False because we don't want Flask reloader to double-run CLI, etc.
    app.run(host="0.0.0.0", port=5000, debug=False)
