"""
Matchweek Service - Current matchweek detection and upcoming renumbering.

Sources number rounds inconsistently once fixtures are postponed or moved
around cup dates. The detector decides which round is "now"; the normalizer
relabels not-yet-played fixtures into contiguous rounds after it.
"""

import logging
from datetime import timedelta
from typing import Iterable, List, Optional, Sequence

from src import config
from src.models.fixture import Fixture

logger = logging.getLogger(__name__)


class CurrentMatchweekDetector:
    """
    Infers the current matchweek from finished fixtures.

    Rounds do not complete at once, so the latest round with results only
    counts as current once most of its fixtures are finished.
    """

    def __init__(self, round_complete_threshold: int = config.ROUND_COMPLETE_THRESHOLD) -> None:
        """
        Args:
            round_complete_threshold: Finished fixtures needed in the latest
                round before it is treated as current
        """
        self.round_complete_threshold = round_complete_threshold

    def detect(self, fixtures: Iterable[Fixture], competition: Optional[str] = None) -> int:
        """
        Detect the current matchweek.

        Args:
            fixtures: Fixtures to inspect (not modified)
            competition: Only consider fixtures of this competition

        Returns:
            Current matchweek, or 0 if no round has started
        """
        finished = [
            f for f in fixtures
            if f.is_finished and (competition is None or f.competition == competition)
        ]
        if not finished:
            return 0

        max_week = max(f.matchweek for f in finished)
        finished_in_max_week = sum(1 for f in finished if f.matchweek == max_week)

        if finished_in_max_week >= self.round_complete_threshold:
            return max_week
        return max(0, max_week - 1)


class MatchweekNormalizer:
    """Renumbers upcoming fixtures into contiguous, date-clustered rounds."""

    def __init__(self, round_gap: Optional[timedelta] = None) -> None:
        """
        Args:
            round_gap: Largest gap between consecutive fixtures of one round
                (defaults to ROUND_GAP_DAYS)
        """
        self.round_gap = round_gap if round_gap is not None else timedelta(days=config.ROUND_GAP_DAYS)

    def group_by_date(self, fixtures: Iterable[Fixture]) -> List[List[Fixture]]:
        """Split fixtures into chronological groups separated by more than round_gap."""
        groups: List[List[Fixture]] = []
        current: List[Fixture] = []
        last_date = None

        for fixture in sorted(fixtures, key=lambda f: f.date):
            if last_date is not None and fixture.date - last_date > self.round_gap:
                groups.append(current)
                current = []
            current.append(fixture)
            last_date = fixture.date

        if current:
            groups.append(current)
        return groups

    def normalize(self, fixtures: Sequence[Fixture], current_matchweek: int) -> List[Fixture]:
        """
        Relabel upcoming fixtures so rounds follow the current matchweek.

        Finished fixtures are never touched, and a fixture already numbered at
        or beyond the first upcoming round keeps its number.

        Args:
            fixtures: Fixtures in any order
            current_matchweek: Output of CurrentMatchweekDetector.detect

        Returns:
            New list in input order; relabeled fixtures are copies
        """
        if current_matchweek <= 0:
            return list(fixtures)

        upcoming = [f for f in fixtures if not f.is_finished]
        if not upcoming:
            return list(fixtures)

        has_upcoming_in_current = any(f.matchweek == current_matchweek for f in upcoming)
        start_week = current_matchweek if has_upcoming_in_current else current_matchweek + 1

        group_index = {}
        for index, group in enumerate(self.group_by_date(upcoming)):
            for fixture in group:
                group_index[fixture.id] = index

        normalized = []
        relabeled = 0
        for fixture in fixtures:
            if fixture.is_finished or fixture.matchweek >= start_week:
                normalized.append(fixture)
                continue

            index = group_index.get(fixture.id)
            # Not expected: every upcoming fixture is grouped
            target = start_week if index is None else start_week + index

            normalized.append(fixture.model_copy(update={"matchweek": target}))
            relabeled += 1

        if relabeled:
            logger.debug(
                f"Relabeled {relabeled} upcoming fixtures from matchweek {start_week}"
            )
        return normalized


def detect_current_matchweek(fixtures: Iterable[Fixture], competition: Optional[str] = None) -> int:
    """Detect the current matchweek with the configured threshold."""
    return CurrentMatchweekDetector().detect(fixtures, competition=competition)


def normalize_upcoming_matchweeks(fixtures: Sequence[Fixture], current_matchweek: int) -> List[Fixture]:
    """Renumber upcoming fixtures with the configured round gap."""
    return MatchweekNormalizer().normalize(fixtures, current_matchweek)
