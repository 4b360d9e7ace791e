"""Tests for ScheduleService."""

import pytest

from src.exceptions import NoDataAvailable
from src.models import PREMIER_LEAGUE, Standing
from src.services.aggregator import FixtureAggregator, FixtureSource
from src.services.cache import FixtureCache
from src.services.schedule_service import (
    ScheduleService,
    ScheduleSnapshot,
    cache_key,
    merge_known_fixtures,
    parse_fixtures,
)


@pytest.fixture
def season_fixtures(make_round, make_fixture):
    """Round 4 played, round 5 upcoming, plus a stale postponed fixture."""
    fixtures = make_round(4, day=21, finished=10) + make_round(5, day=28)
    fixtures.append(make_fixture("Everton", "Fulham", day=29, matchweek=3, fixture_id="late"))
    return fixtures


def make_service(source, **kwargs):
    aggregator = FixtureAggregator(primary=FixtureSource("onefootball", source), **kwargs)
    return ScheduleService(aggregator=aggregator, cache=FixtureCache(ttl_seconds=600))


class TestHelpers:
    """Tests for module helpers."""

    def test_cache_key_ignores_order(self):
        """Selections differing only in order share a key."""
        assert cache_key(["FA Cup", PREMIER_LEAGUE]) == cache_key([PREMIER_LEAGUE, "FA Cup", "FA Cup"])

    def test_merge_prefers_fresh(self, make_fixture):
        """Fresh records replace known ones with the same id."""
        known = [
            make_fixture(fixture_id="a", day=0),
            make_fixture(fixture_id="b", day=7, status="finished", score=(0, 0)),
        ]
        fresh = [make_fixture(fixture_id="b", day=7, status="finished", score=(3, 1))]

        merged = merge_known_fixtures(fresh, known)

        assert [f.id for f in merged] == ["a", "b"]
        assert merged[1].home_score == 3

    def test_parse_fixtures_skips_invalid(self):
        """Malformed records are dropped, valid ones kept."""
        records = [
            {"id": "ok", "date": "2025-08-16T14:00:00Z", "homeTeam": "Arsenal", "awayTeam": "Chelsea"},
            {"id": "bad", "date": "not a date", "homeTeam": "Arsenal", "awayTeam": "Chelsea"},
            {"id": "half", "date": "2025-08-16", "homeTeam": "A", "awayTeam": "B", "homeScore": 1},
        ]

        fixtures = parse_fixtures(records)

        assert [f.id for f in fixtures] == ["ok"]

    def test_parse_fixtures_skips_non_dict_records(self):
        """Records that are not mappings are skipped, not fatal."""
        records = [
            "ars-che",
            None,
            {"id": "ok", "date": "2025-08-16T14:00:00Z", "homeTeam": "Arsenal", "awayTeam": "Chelsea"},
        ]

        fixtures = parse_fixtures(records)

        assert [f.id for f in fixtures] == ["ok"]


class TestBuildSnapshot:
    """Tests for ScheduleService.build_snapshot."""

    def test_current_and_renumbered(self, season_fixtures):
        """The postponed fixture joins the upcoming round."""
        snapshot = ScheduleService().build_snapshot(season_fixtures)
        by_id = {f.id: f for f in snapshot.fixtures}

        assert snapshot.current_matchweek == 4
        assert by_id["late"].matchweek == 5
        assert len(snapshot.fixtures) == len(season_fixtures)

    def test_cups_pass_through(self, season_fixtures, make_fixture):
        """Cup fixtures keep their numbering and do not feed form."""
        cup = make_fixture(
            "Arsenal", "Wrexham", day=25, matchweek=0,
            status="finished", score=(4, 0), competition="FA Cup", fixture_id="cup",
        )
        fixtures = season_fixtures + [cup]

        snapshot = ScheduleService().build_snapshot(fixtures, [Standing(club="Wrexham")])
        by_id = {f.id: f for f in snapshot.fixtures}

        assert by_id["cup"].matchweek == 0
        assert snapshot.fixtures[-1].id == "cup"
        assert snapshot.form == {"Wrexham": ""}

    def test_season_stamped(self, make_fixture):
        """Fixtures without a season get one from their date."""
        stamped = ScheduleService().build_snapshot([
            make_fixture(fixture_id="new"),
            make_fixture(fixture_id="old", season="2024/2025"),
        ])
        seasons = {f.id: f.season for f in stamped.fixtures}

        assert seasons == {"new": "2025/2026", "old": "2024/2025"}

    def test_to_dict(self, make_fixture):
        """Snapshots serialize with camelCase keys."""
        snapshot = ScheduleService().build_snapshot([make_fixture()], sources=["onefootball"])
        data = snapshot.to_dict()

        assert set(data) == {"fixtures", "currentMatchweek", "form", "sources", "degraded"}
        assert data["fixtures"][0]["homeTeam"] == "Arsenal"
        assert data["sources"] == ["onefootball"]
        assert data["degraded"] is False


class TestRefresh:
    """Tests for ScheduleService.refresh."""

    @pytest.mark.asyncio
    async def test_refresh_caches_snapshot(self, season_fixtures, static_source, sample_standings):
        """Fresh snapshots are cached per selection."""
        service = make_service(static_source(season_fixtures))

        snapshot = await service.refresh([PREMIER_LEAGUE], standings=sample_standings)

        assert isinstance(snapshot, ScheduleSnapshot)
        assert snapshot.sources == ["onefootball"]
        assert snapshot.degraded is False
        assert list(snapshot.form) == [s.club for s in sample_standings]
        assert service.get_cached([PREMIER_LEAGUE]) is snapshot
        assert service.get_cached(["FA Cup"]) is None

    @pytest.mark.asyncio
    async def test_known_fixtures_fill_gaps(self, season_fixtures, static_source, make_fixture):
        """Known fixtures missing from the fresh fetch are kept."""
        archived = make_fixture(day=-30, matchweek=1, status="finished", score=(2, 0), fixture_id="archived")
        service = make_service(static_source(season_fixtures))

        snapshot = await service.refresh([PREMIER_LEAGUE], known_fixtures=[archived])

        assert snapshot.fixtures[0].id == "archived"

    @pytest.mark.asyncio
    async def test_degraded_on_total_failure(self, season_fixtures, failing_source):
        """Known fixtures are served when every source fails."""
        service = make_service(failing_source())

        snapshot = await service.refresh([PREMIER_LEAGUE], known_fixtures=season_fixtures)

        assert snapshot.degraded is True
        assert snapshot.sources == []
        assert snapshot.current_matchweek == 4
        assert service.get_cached([PREMIER_LEAGUE]) is None

    @pytest.mark.asyncio
    async def test_failure_without_known_fixtures_raises(self, failing_source):
        """Nothing to fall back on propagates the error."""
        service = make_service(failing_source())

        with pytest.raises(NoDataAvailable):
            await service.refresh([PREMIER_LEAGUE])

    @pytest.mark.asyncio
    async def test_no_aggregator_serves_known(self, season_fixtures):
        """A service without sources works from stored fixtures."""
        snapshot = await ScheduleService().refresh([PREMIER_LEAGUE], known_fixtures=season_fixtures)

        assert snapshot.degraded is True
        assert snapshot.current_matchweek == 4

    @pytest.mark.asyncio
    async def test_cups_only_outage_is_degraded(self, make_fixture, failing_source):
        """Every cup page failing serves known fixtures as degraded, uncached."""
        known = [make_fixture("Chelsea", "Wrexham", day=3, fixture_id="fa-1", competition="FA Cup")]
        service = make_service(failing_source(), competition_fetcher=failing_source())

        snapshot = await service.refresh(["FA Cup"], known_fixtures=known)

        assert snapshot.degraded is True
        assert snapshot.sources == []
        assert [f.id for f in snapshot.fixtures] == ["fa-1"]
        assert service.get_cached(["FA Cup"]) is None

    @pytest.mark.asyncio
    async def test_cups_only_outage_without_known_fixtures_raises(self, failing_source):
        """A cups-only outage with nothing known propagates NoDataAvailable."""
        service = make_service(failing_source(), competition_fetcher=failing_source())

        with pytest.raises(NoDataAvailable):
            await service.refresh(["FA Cup"])

        assert service.get_cached(["FA Cup"]) is None
