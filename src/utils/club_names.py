"""
Club name identity resolution.

Sources spell the same club differently ("Nott'm Forest", "Nottingham
Forest FC", "Man Utd"). Every comparison between club names goes through
this module so that a club is never counted twice or confused with another.

Examples:
    - Manchester United FC -> manchesterunited
    - Man Utd              -> manchesterunited (alias)
    - Brighton & Hove Albion -> brightonandhovealbion
"""

import re
from typing import Any, Dict, Mapping, Optional, TypeVar

T = TypeVar("T")

SUFFIX_TOKENS = ("fc", "afc", "cf", "sc")

_SUFFIX_RE = re.compile(r"\b(" + "|".join(SUFFIX_TOKENS) + r")\b")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")

# Normalized spelling -> canonical normalized key.
# Targets must never appear as sources.
CLUB_NAME_ALIASES: Dict[str, str] = {
    "manunited": "manchesterunited",
    "manutd": "manchesterunited",
    "manchesterutd": "manchesterunited",
    "mancity": "manchestercity",
    "manchestercty": "manchestercity",
    "spurs": "tottenhamhotspur",
    "tottenham": "tottenhamhotspur",
    "westham": "westhamunited",
    "newcastle": "newcastleunited",
    "wolves": "wolverhamptonwanderers",
    "brighton": "brightonandhovealbion",
    "leeds": "leedsunited",
    "forest": "nottinghamforest",
    "nottsforest": "nottinghamforest",
    "nottmforest": "nottinghamforest",
}


def normalize_club_name(name: str) -> str:
    """
    Reduce a club name to its comparison key.

    Lowercases, maps "&" to "and", drops suffix tokens (FC, AFC, CF, SC)
    and strips everything that is not a letter or digit.

    Args:
        name: Club name as given by a source

    Returns:
        Normalized key (may be empty)
    """
    key = (name or "").lower().replace("&", "and")
    key = _SUFFIX_RE.sub("", key)
    key = _NON_ALNUM_RE.sub("", key)
    # "F.C." collapses to "fc" only after punctuation is gone
    if key in SUFFIX_TOKENS:
        return ""
    return key


def _field(entry: Any, *names: str) -> Optional[str]:
    """Read the first present attribute or dict key from a club-like record."""
    for name in names:
        if isinstance(entry, Mapping):
            value = entry.get(name)
        else:
            value = getattr(entry, name, None)
        if value:
            return value
    return None


class ClubNameResolver:
    """Resolves club names to identity keys through an alias table."""

    def __init__(self, aliases: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize the resolver.

        Args:
            aliases: Normalized spelling -> canonical key mapping
                (defaults to CLUB_NAME_ALIASES)
        """
        self.aliases = dict(CLUB_NAME_ALIASES if aliases is None else aliases)

    def resolve(self, name: str) -> str:
        """Get the identity key for a club name."""
        normalized = normalize_club_name(name)
        return self.aliases.get(normalized, normalized)

    def match(self, name_a: str, name_b: str) -> bool:
        """Check whether two names denote the same club."""
        return self.resolve(name_a) == self.resolve(name_b)

    def _entry_matches(self, entry: Any, name: str, normalized: str, resolved: str) -> bool:
        club_name = _field(entry, "name")
        if club_name and self.match(club_name, name):
            return True

        short_name = _field(entry, "short_name", "shortName")
        if short_name and normalize_club_name(short_name) == normalized:
            return True

        return bool(club_name) and self.resolve(club_name) == resolved

    def find_key(self, clubs: Mapping[str, T], name: str) -> Optional[str]:
        """
        Find the key of the club entry matching a name.

        Args:
            clubs: Keyed collection of club-like records with a name and
                an optional short name
            name: Club name to look up

        Returns:
            Key of the first matching entry, or None if no club matches
        """
        normalized = normalize_club_name(name)
        resolved = self.resolve(name)
        if not normalized:
            return None

        for key, entry in clubs.items():
            if self._entry_matches(entry, name, normalized, resolved):
                return key
        return None

    def find_entry(self, clubs: Mapping[str, T], name: str) -> Optional[T]:
        """Find the club entry matching a name, or None if absent."""
        key = self.find_key(clubs, name)
        return clubs[key] if key is not None else None


default_resolver = ClubNameResolver()


def resolve_club_name(name: str) -> str:
    """Get the identity key for a club name using the default aliases."""
    return default_resolver.resolve(name)


def club_names_match(name_a: str, name_b: str) -> bool:
    """Check whether two names denote the same club."""
    return default_resolver.match(name_a, name_b)


def find_club_entry(clubs: Mapping[str, T], name: str) -> Optional[T]:
    """Find the club entry matching a name, or None if absent."""
    return default_resolver.find_entry(clubs, name)


def find_club_key(clubs: Mapping[str, T], name: str) -> Optional[str]:
    """Find the key of the club entry matching a name, or None if absent."""
    return default_resolver.find_key(clubs, name)
