"""Services for the fixture reconciliation engine."""

from src.services.aggregator import AggregateResult, FixtureAggregator, FixtureSource
from src.services.cache import FixtureCache
from src.services.form_service import FormService
from src.services.matchweek_service import (
    CurrentMatchweekDetector,
    MatchweekNormalizer,
    detect_current_matchweek,
    normalize_upcoming_matchweeks,
)
from src.services.schedule_service import ScheduleService, ScheduleSnapshot

__all__ = [
    "AggregateResult",
    "FixtureAggregator",
    "FixtureSource",
    "FixtureCache",
    "FormService",
    "CurrentMatchweekDetector",
    "MatchweekNormalizer",
    "detect_current_matchweek",
    "normalize_upcoming_matchweeks",
    "ScheduleService",
    "ScheduleSnapshot",
]
