# models.py
# -------------------------------
# Database models for the bracket name service.
# The user registry only needs to answer "does any user already own this
# normalized display name?", so the table is small: the unique index on
# normalized_display_name is what finally rejects a duplicate registration
# that slipped past an availability check.
# -------------------------------

from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

from util.usernames import normalize_username

# Shared SQLAlchemy handle used by the Flask app
db = SQLAlchemy()


def utc_now() -> datetime:
    """Return the current time in UTC. Used as a SQLAlchemy default callable."""
    return datetime.now(timezone.utc)


class User(db.Model):
    """A registered bracket player."""
    id = db.Column(db.Integer, primary_key=True)
    display_name = db.Column(db.String(100), nullable=False)
    normalized_display_name = db.Column(
        db.String(100), nullable=False, unique=True, index=True)
    email = db.Column(db.String(120), nullable=True, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now)

    def __init__(self, **kwargs):
        # Keep the lookup key in sync with the display name unless a caller
        # supplies one explicitly (migrations, fixtures).
        if "normalized_display_name" not in kwargs and kwargs.get("display_name"):
            kwargs["normalized_display_name"] = normalize_username(
                kwargs["display_name"])
        super().__init__(**kwargs)

    def __repr__(self):
        return f"<User {self.display_name} ({self.normalized_display_name})>"
