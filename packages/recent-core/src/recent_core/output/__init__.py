"""Output subsystem — where matched names go."""

from recent_core.output.sinks import (
    CountingSink,
    LineSink,
    MatchSink,
    NullSeparatedSink,
    create_sink,
)

__all__ = [
    "CountingSink",
    "LineSink",
    "MatchSink",
    "NullSeparatedSink",
    "create_sink",
]
