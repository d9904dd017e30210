# config.py
# -------------------------------
# Centralized configuration.
# Values come from the environment (a local .env is loaded if present) so the
# same build runs in dev, tests and behind gunicorn.
# -------------------------------

import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
INSTANCE_DIR = os.path.join(BASE_DIR, "instance")
DATA_DIR = os.path.join(BASE_DIR, "data")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ConfigError(ValueError):
    """An environment setting has a value the app cannot use."""


def parse_log_level(value) -> str:
    """Upper-case a level name and check logging knows it."""
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def parse_timeout(value) -> float:
    """Seconds as a positive number."""
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigError(
            f"HTTP_TIMEOUT_SECONDS must be a number of seconds, got {value!r}") from None
    if seconds <= 0:
        raise ConfigError(
            f"HTTP_TIMEOUT_SECONDS must be greater than 0, got {value!r}")
    return seconds


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")

    # Ensure instance directory exists
    os.makedirs(INSTANCE_DIR, exist_ok=True)

    # User registry (SQLite locally, any SQLAlchemy URL in production)
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{os.path.join(INSTANCE_DIR, 'bracket.db')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # -------------------------------
    # Team name data files. Both are read once at app start.
    # SPECIAL_NCAA_NAMES_PATH: alias key -> NCAA SEO name overrides
    # FIRST_FOUR_PATH: year -> play-in placeholder -> advancing team
    # -------------------------------
    SPECIAL_NCAA_NAMES_PATH = os.environ.get(
        "SPECIAL_NCAA_NAMES_PATH", os.path.join(DATA_DIR, "special_ncaa_names.json"))
    FIRST_FOUR_PATH = os.environ.get(
        "FIRST_FOUR_PATH", os.path.join(DATA_DIR, "first_four.json"))

    # NCAA scoreboard provider
    NCAA_SCOREBOARD_URL = os.environ.get(
        "NCAA_SCOREBOARD_URL", "https://data.ncaa.com/casablanca/scoreboard")
    HTTP_TIMEOUT_SECONDS = parse_timeout(os.environ.get("HTTP_TIMEOUT_SECONDS", "10"))

    LOG_LEVEL = parse_log_level(os.environ.get("LOG_LEVEL", "INFO"))
