"""
Custom exceptions for schedule reconciliation.

These exceptions provide clear error categories for aggregation:
- ScheduleError: Base exception for all reconciliation errors
- FetchFailed: A single fixture source could not be reached or parsed
- NoDataAvailable: Every source for a requested scope failed

A club that cannot be resolved is not an error; lookups return None.
"""

from typing import Iterable


class ScheduleError(Exception):
    """Base exception for all reconciliation errors."""
    pass


class FetchFailed(ScheduleError):
    """A fixture source failed to deliver data."""

    def __init__(self, source: str, reason: str = "") -> None:
        self.source = source
        self.reason = reason
        message = f"Source '{source}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NoDataAvailable(ScheduleError):
    """All sources for the requested competitions failed."""

    def __init__(self, failed_sources: Iterable[str]) -> None:
        self.failed_sources = list(failed_sources)
        joined = ", ".join(self.failed_sources) or "none"
        super().__init__(f"No fixture data available (failed sources: {joined})")
