# tests/conftest.py
# -------------------------------
# Shared fixtures: an isolated app per test (temporary SQLite database and
# fixture override tables) plus a dict-backed registry fake.
# -------------------------------

import json

import pytest

from app import create_app
from models import db

FIXTURE_OVERRIDES = {
    "nc_state": "north-carolina-state",
    "saint_marys": "st-marys-ca",
    "usc": "southern-california",
    "texas_a&m_cc": "am-corpus-chris",
    "texas_a&m": "texas-am",
}

FIXTURE_FIRST_FOUR = {
    "2025": {
        "texas_or_xavier": "xavier",
        "alabama_state_or_saint_francis_u": "alabama_state",
    }
}


class FakeRegistry:
    """In-memory stand-in for the user registry. Records every lookup."""

    def __init__(self, records=None, error=None):
        self.records = list(records or [])
        self.error = error
        self.calls = []

    def exists_by_field(self, field, value):
        self.calls.append((field, value))
        if self.error is not None:
            raise self.error
        return any(r.get(field) == value for r in self.records)


@pytest.fixture
def app(tmp_path):
    overrides_path = tmp_path / "special_ncaa_names.json"
    overrides_path.write_text(json.dumps(FIXTURE_OVERRIDES))
    first_four_path = tmp_path / "first_four.json"
    first_four_path.write_text(json.dumps(FIXTURE_FIRST_FOUR))

    app = create_app({
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path/'test.db'}",
        "SPECIAL_NCAA_NAMES_PATH": str(overrides_path),
        "FIRST_FOUR_PATH": str(first_four_path),
        "TESTING": True,
    })
    with app.app_context():
        db.drop_all()
        db.create_all()
        yield app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c
