"""
Form Service - Recent results per club.

Stored form strings go stale, so form is rebuilt from fixture history. Team
names in fixtures rarely match the standings table exactly; every comparison
goes through the club name resolver.
"""

from typing import Dict, Iterable, List, Optional

from src import config
from src.models.fixture import Fixture
from src.models.standing import Standing
from src.utils.club_names import ClubNameResolver, default_resolver


def result_for_side(fixture: Fixture, home: bool) -> str:
    """Get W, D or L for one side of a fixture with a result."""
    own, other = fixture.home_score, fixture.away_score
    if not home:
        own, other = other, own

    if own > other:
        return "W"
    if own < other:
        return "L"
    return "D"


class FormService:
    """Builds most-recent-first form strings from fixture history."""

    def __init__(
        self,
        max_results: int = config.FORM_LENGTH,
        resolver: Optional[ClubNameResolver] = None,
    ) -> None:
        self.max_results = max_results
        self.resolver = resolver or default_resolver

    def build_form(
        self,
        fixtures: Iterable[Fixture],
        standings: Iterable[Standing],
    ) -> Dict[str, str]:
        """
        Build form strings for every club in the standings.

        Args:
            fixtures: Fixture history (not modified)
            standings: League table rows; their club names key the output

        Returns:
            Club name -> up to max_results characters of W/D/L,
            most recent first
        """
        standings = list(standings)
        buckets: Dict[str, List[str]] = {}
        for standing in standings:
            buckets.setdefault(self.resolver.resolve(standing.club), [])

        played = sorted(
            (f for f in fixtures if f.is_finished and f.has_result),
            key=lambda f: f.date,
            reverse=True,
        )

        clubs_needing_results = len(buckets) if self.max_results > 0 else 0

        for fixture in played:
            if clubs_needing_results == 0:
                break

            for team, home in ((fixture.home_team, True), (fixture.away_team, False)):
                bucket = buckets.get(self.resolver.resolve(team))
                if bucket is None or len(bucket) >= self.max_results:
                    continue
                bucket.append(result_for_side(fixture, home))
                if len(bucket) == self.max_results:
                    clubs_needing_results -= 1

        return {
            standing.club: "".join(buckets[self.resolver.resolve(standing.club)])
            for standing in standings
        }
