"""Recency window — unit conversion and overflow guarding."""

from recent_core.window.duration import (
    DAY,
    DEFAULT_WINDOW,
    HOUR,
    MAX_YEARS,
    MINUTE,
    MONTH,
    YEAR,
    combine,
    is_unset,
    overflow_check,
    resolve_duration,
    to_duration,
    year_equivalent,
)
from recent_core.window.models import TimeWindow, WindowOverflowError

__all__ = [
    "DAY",
    "DEFAULT_WINDOW",
    "HOUR",
    "MAX_YEARS",
    "MINUTE",
    "MONTH",
    "TimeWindow",
    "WindowOverflowError",
    "YEAR",
    "combine",
    "is_unset",
    "overflow_check",
    "resolve_duration",
    "to_duration",
    "year_equivalent",
]
