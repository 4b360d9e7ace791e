"""Data models for the fixture reconciliation engine."""

from src.models.club import Club, CLUBS, get_club_by_name, is_known_club
from src.models.competition import (
    Competition,
    CompetitionSource,
    CUP_COMPETITIONS,
    DEFAULT_FIXTURE_COMPETITIONS,
    PREMIER_LEAGUE,
)
from src.models.fixture import Fixture, FixtureStatus
from src.models.standing import Standing

__all__ = [
    "Club",
    "CLUBS",
    "get_club_by_name",
    "is_known_club",
    "Competition",
    "CompetitionSource",
    "CUP_COMPETITIONS",
    "DEFAULT_FIXTURE_COMPETITIONS",
    "PREMIER_LEAGUE",
    "Fixture",
    "FixtureStatus",
    "Standing",
]
