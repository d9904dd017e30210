# util/name_map.py
# Purpose: turn the team names our brackets use into NCAA SEO slugs
# (the "names.seo" field of the NCAA scoreboard) and back.

import json
import re
from types import MappingProxyType
from typing import Mapping, Optional

# Whitespace as the bracket front end sees it (JavaScript \s and trim()):
# includes U+FEFF, excludes the \x1c-\x1f separators that Python counts.
WHITESPACE_CHARS = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE = re.compile(f"[{WHITESPACE_CHARS}]+")


def load_json_table(path: str) -> dict:
    """Read a JSON object from disk. Missing files are a configuration error."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def _string_table(table: Mapping, what: str) -> dict:
    """Copy a str -> str mapping, rejecting anything else."""
    out = {}
    for key, value in table.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(
                f"{what} entries must map strings to strings, got {key!r}: {value!r}")
        out[key] = value
    return out


class TeamNameCanonicalizer:
    """
    Resolves bracket team names to NCAA SEO slugs.

    overrides: alias key -> NCAA name, for schools whose slug can't be derived
        mechanically ("nc_state" -> "north-carolina-st", "usc" ->
        "southern-california"). Keys are normally lowercase and
        underscore-joined.
    first_four: year -> {play-in placeholder key -> advancing team key}.

    Both tables are copied into read-only mappings, so one instance can be
    shared by every request.
    """

    def __init__(self, overrides: Mapping[str, str],
                 first_four: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._overrides = MappingProxyType(_string_table(overrides, "overrides"))
        self._first_four = MappingProxyType({
            str(year): MappingProxyType(_string_table(mapping, f"first_four[{year}]"))
            for year, mapping in (first_four or {}).items()
        })
        # canonical value -> alias key, for reverse lookups
        self._reverse = MappingProxyType(
            {value: key for key, value in self._overrides.items()})

    @classmethod
    def from_files(cls, overrides_path: str,
                   first_four_path: Optional[str] = None) -> "TeamNameCanonicalizer":
        overrides = load_json_table(overrides_path)
        first_four = load_json_table(first_four_path) if first_four_path else {}
        return cls(overrides, first_four)

    @property
    def overrides(self) -> Mapping[str, str]:
        return self._overrides

    def resolve_first_four(self, team_key: str, year=None) -> str:
        """Swap a play-in placeholder for the team that advanced that year."""
        if year is None:
            return team_key
        return self._first_four.get(str(year), {}).get(team_key, team_key)

    def canonicalize(self, raw_name: Optional[str], year=None) -> str:
        """
        "NC State" -> "north-carolina-st", "Texas A&M" -> "texas-am",
        "Alabama State" -> "alabama-st". Never raises; "" and None give "",
        other non-strings are converted with str().

        Lookup order is potential key ("nc_state"), then the trimmed
        lowercase name, then the raw input exactly as given. With no
        override the raw input is used untrimmed, so "  Duke " gives
        "-duke-". The chosen value is rewritten afterwards, so "state"
        inside it becomes "st" too. That rewrite is a plain substring
        replace: "statesboro" comes out as "stsboro".
        """
        if not raw_name:
            return ""
        raw_name = str(raw_name)

        normalized = raw_name.lower().strip(WHITESPACE_CHARS)
        potential_key = _WHITESPACE.sub("_", normalized)

        advanced = self.resolve_first_four(potential_key, year)
        if advanced != potential_key:
            raw_name = advanced
            normalized = advanced.lower().strip(WHITESPACE_CHARS)
            potential_key = _WHITESPACE.sub("_", normalized)

        mapped = (
            self._overrides.get(potential_key)
            or self._overrides.get(normalized)
            or self._overrides.get(raw_name)
            or raw_name
        )

        slug = mapped.lower().replace("_", "-")
        slug = _WHITESPACE.sub("-", slug)
        # slug is already lowercase, so this covers every casing of "state"
        return slug.replace("state", "st")

    def reverse(self, slug: Optional[str]) -> str:
        """
        Best-effort inverse of canonicalize: "alabama-st" -> "alabama_state".

        Known overrides win. Otherwise "-st" is only expanded as a whole
        segment, so "houston" and "st-johns" keep their "st".
        """
        if not slug:
            return ""
        slug = str(slug)

        special = self._reverse.get(slug)
        if special:
            return special

        name = re.sub(r"-st\Z", "_state", slug)
        name = re.sub(r"-st-", "_state_", name)
        return name.replace("-", "_")
