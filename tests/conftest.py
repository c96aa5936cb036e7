"""Shared test fixtures for recent."""

import os
import time
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from recent_core.config.models import RecentConfig


def set_age(path: Path, age: timedelta, reference: float) -> None:
    """Set atime/mtime of *path* to *age* before *reference* (epoch seconds)."""
    ts = reference - age.total_seconds()
    os.utime(path, (ts, ts))


@pytest.fixture
def reference_time() -> float:
    return time.time()


@pytest.fixture
def now(reference_time) -> datetime:
    return datetime.fromtimestamp(reference_time, tz=UTC)


@pytest.fixture
def sample_tree(tmp_path, reference_time) -> Path:
    """The documented example directory.

        .a    modified 14 hours ago
        b     modified 15 days ago
        c/    modified 5 seconds ago
        c/d   modified 2 hours ago
        c/e   modified over a year ago
        c/.f  modified 4 days ago
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / ".a").write_text("a")
    (root / "b").write_text("b")
    (root / "c").mkdir()
    (root / "c" / "d").write_text("d")
    (root / "c" / "e").write_text("e")
    (root / "c" / ".f").write_text("f")

    # Children first: touching the parent afterwards keeps its own age intact
    set_age(root / "c" / "d", timedelta(hours=2), reference_time)
    set_age(root / "c" / "e", timedelta(days=400), reference_time)
    set_age(root / "c" / ".f", timedelta(days=4), reference_time)
    set_age(root / ".a", timedelta(hours=14), reference_time)
    set_age(root / "b", timedelta(days=15), reference_time)
    set_age(root / "c", timedelta(seconds=5), reference_time)
    return root


@pytest.fixture
def age(reference_time):
    """Callable that backdates a path relative to the test's reference time."""

    def _age(path: Path, delta: timedelta) -> None:
        set_age(path, delta, reference_time)

    return _age


@pytest.fixture
def sample_config():
    return RecentConfig()
