"""Recency matching over named paths and directory listings."""

from recent_core.matcher.filesystem import display_name, scan_dir, stat_entry
from recent_core.matcher.matcher import Matcher
from recent_core.matcher.models import Entry, MatchSettings, nanoseconds, timestamp_ns

__all__ = [
    "Entry",
    "MatchSettings",
    "Matcher",
    "display_name",
    "nanoseconds",
    "scan_dir",
    "stat_entry",
    "timestamp_ns",
]
