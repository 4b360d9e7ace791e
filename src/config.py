"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

import logging
import os


def _get_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes')


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


# =============================================================================
# COMPETITION SETTINGS
# =============================================================================
# Canonical label stamped on every fixture from the league sources
PRIMARY_LEAGUE = _get_str('PRIMARY_LEAGUE', 'Premier League')

# =============================================================================
# MATCHWEEK SETTINGS
# =============================================================================
# Finished fixtures needed before the latest round counts as current.
# A 20-club league plays 10 fixtures per round.
ROUND_COMPLETE_THRESHOLD = _get_int('ROUND_COMPLETE_THRESHOLD', 8)

# Upcoming fixtures further apart than this start a new round
ROUND_GAP_DAYS = _get_float('ROUND_GAP_DAYS', 3)

# =============================================================================
# FORM SETTINGS
# =============================================================================
FORM_LENGTH = _get_int('FORM_LENGTH', 6)

# =============================================================================
# AGGREGATION SETTINGS
# =============================================================================
# Upper bound for a single source fetch (in seconds). 0 disables the bound.
FETCH_TIMEOUT_SECONDS = _get_float('FETCH_TIMEOUT_SECONDS', 60)

# Drop cup fixtures that involve none of the league's clubs
FILTER_UNKNOWN_CLUBS = _get_bool('FILTER_UNKNOWN_CLUBS', True)

# =============================================================================
# CACHE SETTINGS
# =============================================================================
# How long an aggregated schedule snapshot stays fresh (in minutes)
CACHE_TTL_MINUTES = _get_int('CACHE_TTL_MINUTES', 25)
CACHE_MAXSIZE = _get_int('CACHE_MAXSIZE', 64)

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = _get_str('LOG_LEVEL', 'INFO')


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging once for scripts and workers."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
