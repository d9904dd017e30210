# registry.py
# -------------------------------
# Existence lookups against the user registry.
# The availability check only needs one capability from storage:
# "is there at least one record whose <field> equals <value>?"
# Anything exposing exists_by_field() can stand in (tests use a dict-backed
# fake), so the check itself never touches SQLAlchemy directly.
# -------------------------------

from models import db, User


class SQLAlchemyUserRegistry:
    """Registry backed by the ``user`` table. Needs an app context."""

    # Only indexed columns may be queried.
    LOOKUP_FIELDS = ("normalized_display_name", "email")

    def exists_by_field(self, field: str, value: str) -> bool:
        if field not in self.LOOKUP_FIELDS:
            raise ValueError(f"Unsupported lookup field: {field!r}")
        column = getattr(User, field)
        hit = (
            db.session.query(User.id)
            .filter(column == value)
            .limit(1)
            .first()
        )
        return hit is not None
