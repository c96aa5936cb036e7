"""Recent Core - recency window, matcher, and output sinks for the recent(1) tool."""

from recent_core.config import ConfigError, RecentConfig, build_config
from recent_core.matcher import Entry, Matcher, MatchSettings
from recent_core.output import MatchSink, create_sink
from recent_core.window import TimeWindow, WindowOverflowError, combine, resolve_duration

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Entry",
    "MatchSettings",
    "MatchSink",
    "Matcher",
    "RecentConfig",
    "TimeWindow",
    "WindowOverflowError",
    "build_config",
    "combine",
    "create_sink",
    "resolve_duration",
]
