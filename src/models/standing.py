"""League standing data model."""

from typing import Optional
from pydantic import BaseModel, Field

from src.types import StandingDict


class Standing(BaseModel):
    """One club's row in the league table."""

    club: str
    position: int = 0
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = Field(default=0, alias="goalsFor")
    goals_against: int = Field(default=0, alias="goalsAgainst")
    goal_difference: int = Field(default=0, alias="goalDifference")
    points: int = 0
    form: Optional[str] = None  # stored form, may be stale

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    def to_dict(self) -> StandingDict:
        """Serialize using the camelCase keys of stored records."""
        return self.model_dump(by_alias=True)
