"""
Type definitions for the fixture reconciliation engine.

Provides TypedDict classes for the plain-data contracts exchanged with
scrapers and the persistence layer.
"""

from typing import TypedDict, Optional, List, Dict


class FixtureDict(TypedDict, total=False):
    """
    Fixture record as produced by a source or stored by persistence.

    Keys use the camelCase spelling of the stored records.
    """
    id: str
    date: str  # ISO-8601
    homeTeam: str
    awayTeam: str
    homeScore: Optional[int]
    awayScore: Optional[int]
    matchweek: int
    status: str  # scheduled, live, finished
    isDerby: bool
    season: Optional[str]
    competition: Optional[str]
    competitionRound: Optional[str]


class StandingDict(TypedDict, total=False):
    """League table row for a club."""
    position: int
    club: str
    played: int
    won: int
    drawn: int
    lost: int
    goalsFor: int
    goalsAgainst: int
    goalDifference: int
    points: int
    form: Optional[str]  # e.g. "WWDLWD"


class ScheduleSnapshotDict(TypedDict):
    """Reconciled schedule returned by ScheduleService."""
    fixtures: List[FixtureDict]
    currentMatchweek: int
    form: Dict[str, str]
    sources: List[str]
    degraded: bool


class CacheStatsDict(TypedDict):
    """Statistics about the schedule cache."""
    size: int
    maxsize: int
    ttl: float
