# username_check.py
# -------------------------------
# Username availability check.
# This module deliberately contains NO Flask routes: it normalizes the raw
# name, validates it locally, then asks the injected registry a single
# exact-match question. It never inserts, reserves or locks anything, so an
# "available" answer is only a snapshot; the unique index on
# user.normalized_display_name decides races at write time.
# -------------------------------

import logging
from typing import Any, Dict

from errors import InternalError, InvalidArgumentError
from util.usernames import normalize_username

logger = logging.getLogger(__name__)

NORMALIZED_FIELD = "normalized_display_name"


def check_username_availability(raw_username: Any, registry) -> Dict[str, bool]:
    """
    Return {"available": True} iff no registered user shares the normalized key.

    Raises:
      InvalidArgumentError: input missing, not a string, or with no [a-z0-9]
        characters. Raised before the registry is contacted.
      InternalError: the registry lookup failed for any reason.
    """
    if not raw_username or not isinstance(raw_username, str):
        raise InvalidArgumentError(
            'The function must be called with a "username" argument.')

    key = normalize_username(raw_username)
    if not key:
        raise InvalidArgumentError(
            "Username must contain alphanumeric characters.")

    try:
        taken = registry.exists_by_field(NORMALIZED_FIELD, key)
    except Exception as exc:
        logger.exception("Error checking username availability for %r", key)
        raise InternalError("Unable to check username availability.") from exc

    logger.debug("Username key %r taken=%s", key, taken)
    return {"available": not taken}
