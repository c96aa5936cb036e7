"""Combine minute/hour/day/month/year counts into a single threshold."""

from __future__ import annotations

import logging
from datetime import timedelta

from recent_core.window.models import TimeWindow, WindowOverflowError

logger = logging.getLogger(__name__)

MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = 24 * HOUR
MONTH = 30 * DAY
YEAR = 365 * DAY

# Rough bound on representable years, not a calendar-exact limit.
MAX_YEARS = 290

DEFAULT_WINDOW = TimeWindow(days=1)


def year_equivalent(window: TimeWindow) -> int:
    """Whole years covered by each count, summed.

    Integer division per unit, so 11 months or 364 days count as zero years.
    """
    return (
        window.years
        + window.months // 12
        + window.days // 365
        + window.hours // (24 * 365)
        + window.minutes // (60 * 24 * 365)
    )


def overflow_check(window: TimeWindow) -> None:
    """Raise WindowOverflowError if the window exceeds MAX_YEARS."""
    years = year_equivalent(window)
    if years > MAX_YEARS:
        raise WindowOverflowError(years, MAX_YEARS)


def is_unset(window: TimeWindow) -> bool:
    return not any(
        (window.years, window.months, window.days, window.hours, window.minutes)
    )


def to_duration(window: TimeWindow) -> timedelta:
    total = YEAR * window.years
    total += MONTH * window.months
    total += DAY * window.days
    total += HOUR * window.hours
    total += MINUTE * window.minutes
    return total


def combine(window: TimeWindow) -> timedelta:
    """Overflow-checked sum of the window's counts."""
    overflow_check(window)
    return to_duration(window)


def resolve_duration(window: TimeWindow) -> timedelta:
    """Threshold for a run: checks the raw counts, then falls back to one day when unset."""
    overflow_check(window)
    if is_unset(window):
        window = DEFAULT_WINDOW
    recent = to_duration(window)
    logger.debug("Recency window resolved to %s", recent)
    return recent
