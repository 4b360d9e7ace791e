"""Competition data model and the fixed competition registry."""

from typing import Iterable, List, Optional
from pydantic import BaseModel, Field

from src import config


class Competition(BaseModel):
    """A cup competition followed alongside the league."""

    id: str
    label: str
    value: str
    schedule_url: str = Field(..., alias="scheduleUrl")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True
        frozen = True


class CompetitionSource(BaseModel):
    """Where to fetch one competition's schedule from."""

    id: str
    competition: str
    url: str

    class Config:
        """Pydantic configuration."""

        frozen = True


PREMIER_LEAGUE = config.PRIMARY_LEAGUE

CUP_COMPETITIONS: List[Competition] = [
    Competition(
        id="fa-cup",
        label="FA Cup",
        value="FA Cup",
        schedule_url="https://www.rezultati.com/nogomet/engleska/fa-cup/raspored",
    ),
    Competition(
        id="carabao-cup",
        label="Carabao Cup",
        value="Carabao Cup",
        schedule_url="https://www.rezultati.com/nogomet/engleska/efl-cup/raspored",
    ),
    Competition(
        id="champions-league",
        label="UEFA Champions League",
        value="UEFA Champions League",
        schedule_url="https://www.rezultati.com/nogomet/europa/liga-prvaka/raspored",
    ),
    Competition(
        id="europa-league",
        label="UEFA Europa League",
        value="UEFA Europa League",
        schedule_url="https://www.rezultati.com/nogomet/europa/europska-liga/raspored",
    ),
    Competition(
        id="conference-league",
        label="UEFA Conference League",
        value="UEFA Conference League",
        schedule_url="https://www.rezultati.com/nogomet/europa/konferencijska-liga/raspored",
    ),
]

DEFAULT_FIXTURE_COMPETITIONS: List[str] = [
    PREMIER_LEAGUE,
    *(competition.value for competition in CUP_COMPETITIONS),
]


def get_competition_by_id(competition_id: str) -> Optional[Competition]:
    """Get a cup competition by its slug, or None if unknown."""
    for competition in CUP_COMPETITIONS:
        if competition.id == competition_id:
            return competition
    return None


def get_competition_sources(competitions: Iterable[str]) -> List[CompetitionSource]:
    """
    Get schedule sources for the selected cup competitions.

    Args:
        competitions: Competition values (e.g. "FA Cup"); unknown values
            and the league itself are ignored

    Returns:
        Sources in registry order
    """
    selected = set(competitions)
    return [
        CompetitionSource(
            id=competition.id,
            competition=competition.value,
            url=competition.schedule_url,
        )
        for competition in CUP_COMPETITIONS
        if competition.value in selected
    ]


def parse_competitions(param: Optional[str]) -> List[str]:
    """
    Parse a comma-separated competition selection.

    A missing or blank selection means every default competition.
    """
    if not param:
        return list(DEFAULT_FIXTURE_COMPETITIONS)

    competitions = [part.strip() for part in param.split(",")]
    competitions = [c for c in competitions if c]
    return competitions or list(DEFAULT_FIXTURE_COMPETITIONS)


def normalize_competition(competition: Optional[str]) -> str:
    """Fixtures without a competition belong to the league."""
    return competition or PREMIER_LEAGUE
