"""Classifies filesystem entries as recent or not, relative to a fixed reference time."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from recent_core.matcher.filesystem import display_name, scan_dir, stat_entry
from recent_core.matcher.models import Entry, MatchSettings

if TYPE_CHECKING:
    from recent_core.config.models import RecentConfig

logger = logging.getLogger(__name__)


def _report_errors(entries: Iterator[Entry], log: Callable[[OSError], None]) -> Iterator[Entry]:
    """Pass entries through, handing a listing failure to *log* and stopping there."""
    try:
        yield from entries
    except OSError as e:
        log(e)


class Matcher:
    """Walks named paths or a directory and hands every hit to ``out``.

    ``out`` receives display names of matches; ``log`` receives OSErrors for
    paths that could not be resolved or listed. Neither is ever None.
    """

    def __init__(
        self,
        settings: MatchSettings,
        out: Callable[[str], None],
        log: Callable[[OSError], None],
    ) -> None:
        self.settings = settings
        self.out = out
        self.log = log

    @classmethod
    def from_config(
        cls,
        config: RecentConfig,
        out: Callable[[str], None],
        log: Callable[[OSError], None],
        now: datetime | None = None,
    ) -> Matcher:
        settings = MatchSettings(
            recent=config.recent,
            now=now or datetime.now(UTC),
            invert=config.invert,
            include_dots=config.include_dots,
            no_slash=config.no_slash,
        )
        return cls(settings, out, log)

    def is_hit(self, entry: Entry) -> bool:
        hit = self.settings.now_ns - entry.mtime_ns < self.settings.recent_ns
        if self.settings.invert:
            hit = not hit
        return hit

    def _check(self, entry: Entry, prefix: str, skip_dot_check: bool) -> None:
        if not skip_dot_check and not self.settings.include_dots and entry.name.startswith("."):
            logger.debug("Skipping dot file %s in %r", entry.name, prefix)
            return
        if self.is_hit(entry):
            self.out(display_name(prefix, entry.name, entry.is_dir, self.settings.no_slash))

    def match(self, paths: Iterable[str]) -> None:
        """Match paths named explicitly, e.g. on the command line.

        A directory is read as if the matcher were run inside it; the directory
        itself is never reported. Named files skip the dot-file filter.
        """
        for path in paths:
            try:
                entry = stat_entry(path)
            except OSError as e:
                self.log(e)
                continue
            if entry.is_dir:
                self.read_dir(path)
            else:
                self._check(entry, "", skip_dot_check=True)

    def read_dir(self, dirname: str) -> None:
        """Match the immediate children of *dirname*."""
        logger.debug("Scanning %s", dirname)
        for entry in _report_errors(scan_dir(dirname), self.log):
            self._check(entry, dirname, skip_dot_check=False)
