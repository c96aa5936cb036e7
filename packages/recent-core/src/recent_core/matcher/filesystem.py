"""Filesystem primitives used by the matcher: metadata lookup and directory listing."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator

from recent_core.matcher.models import Entry

logger = logging.getLogger(__name__)


def _entry_from_stat(name: str, st: os.stat_result) -> Entry:
    return Entry(
        name=name,
        mtime_ns=st.st_mtime_ns,
        is_dir=stat.S_ISDIR(st.st_mode),
    )


def stat_entry(path: str) -> Entry:
    """Look up *path*, following symlinks. Raises OSError if it can't be resolved."""
    return _entry_from_stat(path, os.stat(path))


def scan_dir(path: str) -> Iterator[Entry]:
    """Yield the immediate children of *path*.

    Children are described by their own metadata (symlinks are not followed).
    A child removed between listing and lookup is skipped. Any other OSError,
    including failure to open *path*, ends the iteration.
    """
    with os.scandir(path) as it:
        for dirent in it:
            try:
                st = dirent.stat(follow_symlinks=False)
            except FileNotFoundError:
                logger.debug("Entry vanished during scan: %s", dirent.path)
                continue
            yield _entry_from_stat(dirent.name, st)


def display_name(prefix: str, name: str, is_dir: bool, no_slash: bool = False) -> str:
    """Path to print for a match: joined, normalized, and slash-suffixed for directories."""
    shown = os.path.normpath(os.path.join(prefix, name))
    if is_dir and not no_slash:
        shown += "/"
    return shown
