"""
Fixture Aggregator - Merges fixtures from several sources.

The league comes from a primary source with a fallback; cup competitions
come from schedule pages that may serve several cups each. Sources are
fetched concurrently, merged with first-wins deduplication by fixture id
and returned in date order.
"""

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from src import config
from src.exceptions import FetchFailed, NoDataAvailable
from src.models.club import CLUBS, Club
from src.models.competition import CompetitionSource, get_competition_sources
from src.models.fixture import Fixture
from src.utils.club_names import find_club_entry
from src.utils.derbies import is_derby

logger = logging.getLogger(__name__)

LeagueFetcher = Callable[[], Awaitable[List[Fixture]]]
CompetitionFetcher = Callable[[List[CompetitionSource]], Awaitable[List[Fixture]]]

COMPETITIONS_SOURCE_NAME = "competitions"


@dataclass(frozen=True)
class FixtureSource:
    """A named league fetcher."""

    name: str
    fetch: LeagueFetcher


@dataclass
class AggregateResult:
    """Merged fixtures plus the names of the sources that contributed."""

    fixtures: List[Fixture] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)


def dedupe_fixtures(fixtures: Iterable[Fixture]) -> List[Fixture]:
    """Keep the first fixture seen for every id."""
    by_id: Dict[str, Fixture] = {}
    for fixture in fixtures:
        by_id.setdefault(fixture.id, fixture)
    return list(by_id.values())


def summarize_competitions(fixtures: Iterable[Fixture]) -> str:
    """Summarize fixture counts per competition, e.g. "Premier League: 10, FA Cup: 2"."""
    counts = Counter(f.competition for f in fixtures)
    return ", ".join(f"{competition}: {count}" for competition, count in counts.items())


class FixtureAggregator:
    """
    Collects fixtures for the selected competitions.

    Fetchers are injected; the aggregator itself performs no I/O.
    """

    def __init__(
        self,
        primary: FixtureSource,
        fallback: Optional[FixtureSource] = None,
        competition_fetcher: Optional[CompetitionFetcher] = None,
        primary_league: str = config.PRIMARY_LEAGUE,
        timeout: Optional[float] = config.FETCH_TIMEOUT_SECONDS,
        filter_unknown_clubs: bool = config.FILTER_UNKNOWN_CLUBS,
        known_clubs: Optional[Mapping[str, Club]] = None,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            primary: Preferred league source
            fallback: League source used when the primary fails
            competition_fetcher: Fetches cup fixtures for the sources sharing
                one schedule page
            primary_league: Label stamped on every league fixture
            timeout: Bound for each fetch in seconds (None or 0 disables)
            filter_unknown_clubs: Drop cup fixtures involving no known club
            known_clubs: Club registry used by the filter (defaults to CLUBS)
        """
        self.primary = primary
        self.fallback = fallback
        self.competition_fetcher = competition_fetcher
        self.primary_league = primary_league
        self.timeout = timeout
        self.filter_unknown_clubs = filter_unknown_clubs
        self.known_clubs = known_clubs if known_clubs is not None else CLUBS

    async def _call(self, name: str, fetch: Callable[..., Awaitable[List[Fixture]]], *args) -> List[Fixture]:
        """Run one fetch, converting every failure into FetchFailed."""
        try:
            if self.timeout:
                return list(await asyncio.wait_for(fetch(*args), timeout=self.timeout))
            return list(await fetch(*args))
        except FetchFailed:
            raise
        except asyncio.TimeoutError as e:
            raise FetchFailed(name, f"timed out after {self.timeout}s") from e
        except Exception as e:
            raise FetchFailed(name, str(e)) from e

    def _stamp_league(self, fixtures: Iterable[Fixture]) -> List[Fixture]:
        return [
            f if f.competition == self.primary_league
            else f.model_copy(update={"competition": self.primary_league})
            for f in fixtures
        ]

    async def fetch_league(self) -> Tuple[Optional[str], List[Fixture]]:
        """
        Fetch league fixtures, falling back once if the primary source fails.

        Returns:
            Tuple of (source name or None if every source failed, fixtures)
        """
        candidates = [self.primary] + ([self.fallback] if self.fallback else [])

        for index, source in enumerate(candidates):
            try:
                fixtures = await self._call(source.name, source.fetch)
            except FetchFailed as e:
                if index + 1 < len(candidates):
                    logger.warning(f"{e}; falling back to {candidates[index + 1].name}")
                else:
                    logger.error(f"{e}; no league source left")
                continue
            return source.name, self._stamp_league(fixtures)

        return None, []

    def batch_competition_sources(self, competitions: Iterable[str]) -> Dict[str, List[CompetitionSource]]:
        """Group selected cup sources by schedule page, in registry order."""
        batches: Dict[str, List[CompetitionSource]] = {}
        for source in get_competition_sources(competitions):
            batches.setdefault(source.url, []).append(source)
        return batches

    def _involves_known_club(self, fixture: Fixture) -> bool:
        return (
            find_club_entry(self.known_clubs, fixture.home_team) is not None
            or find_club_entry(self.known_clubs, fixture.away_team) is not None
        )

    async def fetch_competition_batch(self, url: str, sources: List[CompetitionSource]) -> Optional[List[Fixture]]:
        """
        Fetch the cups served by one schedule page.

        Returns:
            Fixtures, or None if the page could not be fetched
        """
        names = ", ".join(s.competition for s in sources)
        try:
            fixtures = await self._call(url, self.competition_fetcher, sources)
        except FetchFailed as e:
            logger.error(f"Failed to fetch {names}: {e}")
            return None

        if len(sources) == 1:
            only = sources[0].competition
            fixtures = [
                f if f.competition == only else f.model_copy(update={"competition": only})
                for f in fixtures
            ]

        if self.filter_unknown_clubs:
            fixtures = [f for f in fixtures if self._involves_known_club(f)]

        logger.info(f"Fetched {len(fixtures)} fixtures for {names}")
        return fixtures

    def _mark_derbies(self, fixtures: Sequence[Fixture]) -> List[Fixture]:
        return [
            f.model_copy(update={"is_derby": True})
            if not f.is_derby and is_derby(f.home_team, f.away_team)
            else f
            for f in fixtures
        ]

    async def aggregate(self, competitions: Iterable[str]) -> AggregateResult:
        """
        Collect, merge and deduplicate fixtures for the selected competitions.

        Args:
            competitions: Competition values; the primary league label
                selects the league sources, cup values select cup pages

        Returns:
            AggregateResult with fixtures sorted by date. League fixtures
            come first in the merge, so they win id collisions.

        Raises:
            NoDataAvailable: The league was requested, every league source
                failed and no cup page delivered data either
        """
        selected = set(competitions)
        wants_league = self.primary_league in selected
        batches = self.batch_competition_sources(selected) if self.competition_fetcher else {}

        tasks = []
        if wants_league:
            tasks.append(self.fetch_league())
        tasks.extend(self.fetch_competition_batch(url, sources) for url, sources in batches.items())

        results = list(await asyncio.gather(*tasks))

        collected: List[Fixture] = []
        sources_used: List[str] = []
        league_failed = False

        if wants_league:
            league_source, league_fixtures = results.pop(0)
            if league_source is None:
                league_failed = True
            else:
                sources_used.append(league_source)
                collected.extend(league_fixtures)

        cup_results = [r for r in results if r is not None]
        for fixtures in cup_results:
            collected.extend(fixtures)
        if cup_results:
            sources_used.append(COMPETITIONS_SOURCE_NAME)

        if league_failed and not cup_results:
            failed = [self.primary.name] + ([self.fallback.name] if self.fallback else [])
            failed.extend(batches.keys())
            raise NoDataAvailable(failed)

        merged = sorted(dedupe_fixtures(collected), key=lambda f: f.date)
        merged = self._mark_derbies(merged)

        if sources_used:
            logger.info(f"Sources used: {', '.join(sources_used)}")
        if merged:
            logger.info(f"Aggregated fixtures: {summarize_competitions(merged)}")

        return AggregateResult(fixtures=merged, sources=sources_used)
