"""
Schedule Service - Runs the reconciliation pipeline.

aggregate -> detect current matchweek -> normalize upcoming rounds ->
build form. Results are cached per competition selection; when every source
fails the service falls back to previously known fixtures and marks the
snapshot as degraded.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError

from src import config
from src.exceptions import NoDataAvailable
from src.models.fixture import Fixture
from src.models.standing import Standing
from src.services.aggregator import FixtureAggregator
from src.services.cache import FixtureCache
from src.services.form_service import FormService
from src.services.matchweek_service import CurrentMatchweekDetector, MatchweekNormalizer
from src.types import ScheduleSnapshotDict
from src.utils.seasons import season_label_full

logger = logging.getLogger(__name__)


@dataclass
class ScheduleSnapshot:
    """Reconciled view of the schedule."""

    fixtures: List[Fixture]
    current_matchweek: int
    form: Dict[str, str]
    sources: List[str] = field(default_factory=list)
    degraded: bool = False

    def to_dict(self) -> ScheduleSnapshotDict:
        """Serialize for the API/persistence layer."""
        return {
            "fixtures": [f.to_dict() for f in self.fixtures],
            "currentMatchweek": self.current_matchweek,
            "form": dict(self.form),
            "sources": list(self.sources),
            "degraded": self.degraded,
        }


def cache_key(competitions: Iterable[str]) -> str:
    """Cache key for a competition selection, independent of order."""
    return "schedule:" + ",".join(sorted(set(competitions)))


def merge_known_fixtures(fresh: Sequence[Fixture], known: Sequence[Fixture]) -> List[Fixture]:
    """Fresh fixtures win by id; known fixtures fill the gaps."""
    by_id: Dict[str, Fixture] = {}
    for fixture in list(fresh) + list(known):
        by_id.setdefault(fixture.id, fixture)
    return sorted(by_id.values(), key=lambda f: f.date)


def parse_fixtures(records: Iterable[Dict[str, Any]]) -> List[Fixture]:
    """
    Validate raw fixture records, skipping the malformed ones.

    Args:
        records: Dicts using stored (camelCase) or model field names

    Returns:
        Valid fixtures in input order
    """
    fixtures = []
    for record in records:
        try:
            fixtures.append(Fixture.model_validate(record))
        except ValidationError as e:
            record_id = record.get("id", "?") if isinstance(record, dict) else "?"
            logger.warning(f"Skipping invalid fixture {record_id}: {e.error_count()} errors")
    return fixtures


class ScheduleService:
    """Service layer composing aggregation, matchweeks and form."""

    def __init__(
        self,
        aggregator: Optional[FixtureAggregator] = None,
        cache: Optional[FixtureCache] = None,
        detector: Optional[CurrentMatchweekDetector] = None,
        normalizer: Optional[MatchweekNormalizer] = None,
        form_service: Optional[FormService] = None,
        primary_league: str = config.PRIMARY_LEAGUE,
    ) -> None:
        self.aggregator = aggregator
        self.cache = cache if cache is not None else FixtureCache()
        self.detector = detector or CurrentMatchweekDetector()
        self.normalizer = normalizer or MatchweekNormalizer()
        self.form_service = form_service or FormService()
        self.primary_league = primary_league

    def build_snapshot(
        self,
        fixtures: Sequence[Fixture],
        standings: Sequence[Standing] = (),
        sources: Sequence[str] = (),
        degraded: bool = False,
    ) -> ScheduleSnapshot:
        """
        Reconcile a fixture list into a snapshot.

        Only league fixtures drive the current matchweek, are renumbered
        and feed the form table; cup fixtures pass through unchanged.
        """
        fixtures = [
            f if f.season else f.model_copy(update={"season": season_label_full(f.date)})
            for f in fixtures
        ]

        league = [f for f in fixtures if f.competition == self.primary_league]
        current = self.detector.detect(league)
        normalized_league = iter(self.normalizer.normalize(league, current))

        reconciled = [
            next(normalized_league) if f.competition == self.primary_league else f
            for f in fixtures
        ]
        league = [f for f in reconciled if f.competition == self.primary_league]

        return ScheduleSnapshot(
            fixtures=reconciled,
            current_matchweek=current,
            form=self.form_service.build_form(league, standings),
            sources=list(sources),
            degraded=degraded,
        )

    async def refresh(
        self,
        competitions: Iterable[str],
        known_fixtures: Sequence[Fixture] = (),
        standings: Sequence[Standing] = (),
    ) -> ScheduleSnapshot:
        """
        Aggregate fresh fixtures and reconcile them with known ones.

        Args:
            competitions: Competition selection
            known_fixtures: Previously stored fixtures
            standings: League table rows for the form map

        Returns:
            ScheduleSnapshot; degraded when built from known fixtures only

        Raises:
            NoDataAvailable: No source delivered data and nothing is known
        """
        competitions = list(competitions)
        try:
            if self.aggregator is None:
                raise NoDataAvailable([])
            result = await self.aggregator.aggregate(competitions)
            if not result.sources:
                raise NoDataAvailable(competitions)
        except NoDataAvailable as e:
            if not known_fixtures:
                raise
            logger.warning(f"{e}; serving {len(known_fixtures)} known fixtures")
            fixtures = sorted(known_fixtures, key=lambda f: f.date)
            return self.build_snapshot(fixtures, standings, degraded=True)

        fixtures = merge_known_fixtures(result.fixtures, known_fixtures)
        snapshot = self.build_snapshot(fixtures, standings, sources=result.sources)
        self.cache.set(cache_key(competitions), snapshot)
        return snapshot

    def get_cached(self, competitions: Iterable[str]) -> Optional[ScheduleSnapshot]:
        """Get the cached snapshot for a selection, or None if missing/expired."""
        return self.cache.get(cache_key(competitions))


# CLI entry point for testing
if __name__ == '__main__':
    import json
    import sys

    config.configure_logging()

    if len(sys.argv) != 2:
        print("Usage: python -m src.services.schedule_service <snapshot.json>")
        sys.exit(1)

    with open(sys.argv[1], encoding="utf-8") as fh:
        data = json.load(fh)

    stored = parse_fixtures(data.get("fixtures", []))
    table = [Standing.model_validate(s) for s in data.get("standings", [])]

    service = ScheduleService(aggregator=None)
    snapshot = service.build_snapshot(stored, table)

    print(f"Current matchweek: {snapshot.current_matchweek}")
    upcoming = [f for f in snapshot.fixtures if not f.is_finished]
    print(f"\n=== Upcoming ({len(upcoming)}) ===")
    for f in upcoming[:10]:
        print(f"  MW{f.matchweek:>2} {f.date:%Y-%m-%d} {f.get_title()}")
    print("\n=== Form ===")
    for club, form in snapshot.form.items():
        print(f"  {club:<28} {form}")
