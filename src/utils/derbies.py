"""Derby detection between the league's biggest clubs."""

from src.utils.club_names import resolve_club_name

DERBY_CLUBS = (
    "Arsenal",
    "Manchester City",
    "Aston Villa",
    "Chelsea",
    "Liverpool",
    "Tottenham Hotspur",
    "Manchester United",
    "Newcastle United",
)

_DERBY_KEYS = frozenset(resolve_club_name(name) for name in DERBY_CLUBS)


def is_derby(home_team: str, away_team: str) -> bool:
    """Check whether a fixture is played between two distinct big clubs."""
    home_key = resolve_club_name(home_team)
    away_key = resolve_club_name(away_team)

    if home_key == away_key:
        return False

    return home_key in _DERBY_KEYS and away_key in _DERBY_KEYS
