# util/usernames.py
# Purpose: collapse display names into the key used for uniqueness checks.

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_username(raw) -> str:
    """
    Lowercase and delete every character outside [a-z0-9].

    "John_Doe123!" -> "johndoe123". Spaces, punctuation and non-ASCII letters
    are dropped, not replaced. Anything that is not a string yields "".
    """
    if not isinstance(raw, str):
        return ""
    return _NON_ALNUM.sub("", raw.lower())
