"""
Season helpers.

League seasons run from August to May:
- August - December: first half (Aug 2025 belongs to 2025/26)
- January - July: second half (Jan 2026 belongs to 2025/26)
"""

from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime]

SEASON_START_MONTH = 8


def season_start_year(day: Optional[DateLike] = None) -> int:
    """Get the year the season containing `day` started."""
    day = day or datetime.now()
    return day.year if day.month >= SEASON_START_MONTH else day.year - 1


def season_label_short(day: Optional[DateLike] = None) -> str:
    """Season label in short form, e.g. "2025/26"."""
    start = season_start_year(day)
    return f"{start}/{str(start + 1)[-2:]}"


def season_label_full(day: Optional[DateLike] = None) -> str:
    """Season label in full form, e.g. "2025/2026"."""
    start = season_start_year(day)
    return f"{start}/{start + 1}"


def season_start_date(day: Optional[DateLike] = None) -> date:
    """Approximate first day of the season (1 August)."""
    return date(season_start_year(day), SEASON_START_MONTH, 1)


def season_end_date(day: Optional[DateLike] = None) -> date:
    """Approximate last day of the season (30 June)."""
    return date(season_start_year(day) + 1, 6, 30)
