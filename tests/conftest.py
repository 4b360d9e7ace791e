"""
Shared test fixtures and configuration.

Provides fixture factories, sample standings and fake sources for all test
files.
"""

import itertools
from datetime import datetime, timedelta, timezone
from typing import Callable, List

import pytest

from src.models import CLUBS, Fixture, Standing

BASE_DATE = datetime(2025, 8, 16, 15, 0, tzinfo=timezone.utc)

LEAGUE_CLUBS = [club.name for club in CLUBS.values()]


# =============================================================================
# FIXTURE FACTORIES
# =============================================================================

@pytest.fixture
def make_fixture() -> Callable[..., Fixture]:
    """Provide a factory building fixtures relative to BASE_DATE."""
    ids = itertools.count(1)

    def _make(
        home: str = "Arsenal",
        away: str = "Chelsea",
        day: float = 0,
        matchweek: int = 1,
        status: str = "scheduled",
        score: tuple = None,
        competition: str = None,
        fixture_id: str = None,
        **extra,
    ) -> Fixture:
        home_score, away_score = score if score is not None else (None, None)
        return Fixture(
            id=fixture_id or f"fx-{next(ids)}",
            date=BASE_DATE + timedelta(days=day),
            home_team=home,
            away_team=away,
            home_score=home_score,
            away_score=away_score,
            matchweek=matchweek,
            status=status,
            competition=competition,
            **extra,
        )

    return _make


@pytest.fixture
def make_round(make_fixture) -> Callable[..., List[Fixture]]:
    """Provide a factory building a full ten-fixture league round."""

    def _make(matchweek: int, day: float, finished: int = 0) -> List[Fixture]:
        fixtures = []
        for i in range(10):
            home = LEAGUE_CLUBS[(2 * i + matchweek) % 20]
            away = LEAGUE_CLUBS[(2 * i + 1 + matchweek) % 20]
            if i < finished:
                fixtures.append(make_fixture(
                    home, away, day=day, matchweek=matchweek,
                    status="finished", score=(1, 0),
                    fixture_id=f"mw{matchweek}-{i}",
                ))
            else:
                fixtures.append(make_fixture(
                    home, away, day=day, matchweek=matchweek,
                    fixture_id=f"mw{matchweek}-{i}",
                ))
        return fixtures

    return _make


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_standings() -> List[Standing]:
    """Provide a short league table using the table's own spellings."""
    return [
        Standing(club="Arsenal", position=1, points=9),
        Standing(club="Manchester City", position=2, points=7),
        Standing(club="Nottingham Forest", position=3, points=6),
        Standing(club="Tottenham Hotspur", position=4, points=4),
    ]


# =============================================================================
# FAKE SOURCES
# =============================================================================

@pytest.fixture
def static_source():
    """Provide a factory for async fetchers returning fixed fixtures."""

    def _make(fixtures: List[Fixture]):
        async def fetch(*args) -> List[Fixture]:
            return list(fixtures)
        return fetch

    return _make


@pytest.fixture
def failing_source():
    """Provide a factory for async fetchers that always raise."""

    def _make(error: Exception = None):
        async def fetch(*args) -> List[Fixture]:
            raise error or RuntimeError("page layout changed")
        return fetch

    return _make
