"""Data models for the matcher subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def nanoseconds(delta: timedelta) -> int:
    """Whole nanoseconds in *delta*, computed without going through floats."""
    return delta // timedelta(microseconds=1) * 1000


def timestamp_ns(moment: datetime) -> int:
    """Nanoseconds since the Unix epoch for an aware datetime."""
    return nanoseconds(moment - EPOCH)


@dataclass(frozen=True)
class Entry:
    """Metadata for one filesystem entry, as seen at lookup time.

    ``mtime_ns`` is the raw ``st_mtime_ns``. It is kept as an integer because
    filesystems accept modification times far outside what ``datetime`` can hold.
    """

    name: str
    mtime_ns: int
    is_dir: bool = False


@dataclass(frozen=True)
class MatchSettings:
    """Read-only policy for a single run of the matcher."""

    recent: timedelta
    now: datetime
    invert: bool = False
    include_dots: bool = False
    no_slash: bool = False

    def __post_init__(self) -> None:
        if self.now.tzinfo is None:
            raise ValueError("now must be timezone-aware")

    @property
    def now_ns(self) -> int:
        return timestamp_ns(self.now)

    @property
    def recent_ns(self) -> int:
        return nanoseconds(self.recent)
