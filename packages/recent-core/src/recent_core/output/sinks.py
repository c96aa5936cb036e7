"""Destinations for matched names: newline-separated, NUL-separated, or silent."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class MatchSink(Protocol):
    """Receives each matched display name."""

    count: int

    def __call__(self, name: str) -> None: ...


class _StreamSink:
    separator = "\n"

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.count = 0

    def __call__(self, name: str) -> None:
        self.count += 1
        self.stream.write(name + self.separator)


class LineSink(_StreamSink):
    """One name per line."""


class NullSeparatedSink(_StreamSink):
    """Names terminated by NUL, for ``xargs -0``."""

    separator = "\0"


class CountingSink:
    """Prints nothing; only remembers whether anything matched."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self, name: str) -> None:
        self.count += 1


_SINK_MAP: dict[str, type[_StreamSink] | type[CountingSink]] = {
    "lines": LineSink,
    "print0": NullSeparatedSink,
    "quiet": CountingSink,
}


def create_sink(mode: str, stream: TextIO | None = None) -> MatchSink:
    """Create the sink for an output mode (``lines``, ``print0`` or ``quiet``)."""
    cls = _SINK_MAP.get(mode)
    if cls is None:
        raise ValueError(
            f"Unsupported output mode: {mode!r}. Supported: {', '.join(_SINK_MAP)}"
        )
    if issubclass(cls, _StreamSink):
        return cls(stream)
    return cls()
