"""Fixture data model."""

from datetime import datetime, timezone
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from src import config
from src.types import FixtureDict
from src.models.competition import normalize_competition

FixtureStatus = Literal["scheduled", "live", "finished"]


class Fixture(BaseModel):
    """Represents a scheduled or played match."""

    id: str
    date: datetime
    home_team: str = Field(..., alias="homeTeam")
    away_team: str = Field(..., alias="awayTeam")
    home_score: Optional[int] = Field(default=None, alias="homeScore")
    away_score: Optional[int] = Field(default=None, alias="awayScore")
    matchweek: int = Field(default=0, ge=0)  # 0 when the source gave none
    status: FixtureStatus = "scheduled"
    is_derby: bool = Field(default=False, alias="isDerby")
    season: Optional[str] = None
    competition: str = config.PRIMARY_LEAGUE
    competition_round: Optional[str] = Field(default=None, alias="competitionRound")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    @field_validator("competition", mode="before")
    @classmethod
    def _default_competition(cls, value: Optional[str]) -> str:
        return normalize_competition(value)

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _check_scores(self) -> "Fixture":
        if (self.home_score is None) != (self.away_score is None):
            raise ValueError("home_score and away_score must both be set or both be empty")
        if self.status == "finished" and self.home_score is None:
            raise ValueError("a finished fixture needs a score")
        return self

    @property
    def is_finished(self) -> bool:
        """True once the match has been played to completion."""
        return self.status == "finished"

    @property
    def has_result(self) -> bool:
        """True when both scores are known."""
        return self.home_score is not None and self.away_score is not None

    def get_title(self) -> str:
        """Get a display title based on match status."""
        home = self.home_team
        away = self.away_team

        if self.has_result and self.status == "finished":
            return f"{home} {self.home_score} - {self.away_score} {away}"
        if self.has_result and self.status == "live":
            return f"[LIVE] {home} {self.home_score} - {self.away_score} {away}"

        return f"{home} vs {away}"

    def to_dict(self) -> FixtureDict:
        """Serialize using the camelCase keys of stored records."""
        return self.model_dump(mode="json", by_alias=True)
