"""Club data model and the league club registry."""

from typing import Dict, Optional
from pydantic import BaseModel, Field

from src.utils.club_names import find_club_entry


class Club(BaseModel):
    """Represents a league club."""

    id: str
    name: str
    short_name: str = Field(..., alias="shortName")
    primary_color: str = Field(default="#000000", alias="primaryColor")
    secondary_color: str = Field(default="#FFFFFF", alias="secondaryColor")
    text_color: str = Field(default="#FFFFFF", alias="textColor")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True


def _club(club_id: str, name: str, short_name: str, primary: str, secondary: str, text: str) -> Club:
    return Club(
        id=club_id,
        name=name,
        short_name=short_name,
        primary_color=primary,
        secondary_color=secondary,
        text_color=text,
    )


CLUBS: Dict[str, Club] = {
    "arsenal": _club("arsenal", "Arsenal", "ARS", "#EF0107", "#9C824A", "#FFFFFF"),
    "astonVilla": _club("astonVilla", "Aston Villa", "AVL", "#95BFE5", "#670E36", "#FFFFFF"),
    "bournemouth": _club("bournemouth", "Bournemouth", "BOU", "#DA020E", "#000000", "#FFFFFF"),
    "brentford": _club("brentford", "Brentford", "BRE", "#E30613", "#FFFFFF", "#FFFFFF"),
    "brighton": _club("brighton", "Brighton & Hove Albion", "BHA", "#0057B8", "#FFFFFF", "#FFFFFF"),
    "chelsea": _club("chelsea", "Chelsea", "CHE", "#034694", "#FFFFFF", "#FFFFFF"),
    "crystalPalace": _club("crystalPalace", "Crystal Palace", "CRY", "#1B458F", "#C4122E", "#FFFFFF"),
    "everton": _club("everton", "Everton", "EVE", "#003399", "#FFFFFF", "#FFFFFF"),
    "fulham": _club("fulham", "Fulham", "FUL", "#000000", "#FFFFFF", "#FFFFFF"),
    "ipswich": _club("ipswich", "Ipswich Town", "IPS", "#0033A0", "#FF6600", "#FFFFFF"),
    "leicester": _club("leicester", "Leicester City", "LEI", "#003090", "#FDBE11", "#FFFFFF"),
    "liverpool": _club("liverpool", "Liverpool", "LIV", "#C8102E", "#FFFFFF", "#FFFFFF"),
    "manCity": _club("manCity", "Manchester City", "MCI", "#6CABDD", "#FFFFFF", "#000000"),
    "manUnited": _club("manUnited", "Manchester United", "MUN", "#DA020E", "#FFFFFF", "#FFFFFF"),
    "newcastle": _club("newcastle", "Newcastle United", "NEW", "#241F20", "#FFFFFF", "#FFFFFF"),
    "nottingham": _club("nottingham", "Nottingham Forest", "NFO", "#E53233", "#FFFFFF", "#FFFFFF"),
    "southampton": _club("southampton", "Southampton", "SOU", "#D71920", "#FFFFFF", "#FFFFFF"),
    "tottenham": _club("tottenham", "Tottenham Hotspur", "TOT", "#132257", "#FFFFFF", "#FFFFFF"),
    "westHam": _club("westHam", "West Ham United", "WHU", "#7A263A", "#1BB1E7", "#FFFFFF"),
    "wolves": _club("wolves", "Wolverhampton Wanderers", "WOL", "#FDB913", "#231F20", "#000000"),
}


def get_club_by_name(name: str) -> Optional[Club]:
    """
    Get a league club by any of its spellings.

    Returns:
        Club or None if the name is not a league club
    """
    return find_club_entry(CLUBS, name)


def is_known_club(name: str) -> bool:
    """Check whether a name denotes one of the league clubs."""
    return get_club_by_name(name) is not None
