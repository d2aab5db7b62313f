"""Shared test fixtures for Peacefully."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from journal.models import Reflection  # noqa: E402

UTC = timezone.utc

# Wednesday 12 Feb 2025, 15:00 UTC. Monday of that week is 10 Feb.
FIXED_NOW = datetime(2025, 2, 12, 15, 0, tzinfo=UTC)


def make_reflection(date, theme="gratitude", content="A quiet moment today", rid=None):
    """Build a Reflection from an ISO string or datetime."""
    if rid is None:
        rid = f"r{abs(hash((str(date), theme, content))) % 10**9}"
    return Reflection(id=rid, date=date, theme=theme, prompt="", content=content)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def utc():
    return UTC


@pytest.fixture
def temp_dirs(tmp_path):
    """Create temp directories for reflections and config."""
    reflections_dir = tmp_path / "reflections"
    reflections_dir.mkdir()

    return {
        "reflections_dir": reflections_dir,
        "config_path": tmp_path / "config.yaml",
    }


@pytest.fixture
def sample_reflections():
    """Three-day run ending today plus an older two-day run."""
    return [
        make_reflection("2025-02-12T08:00:00+00:00", "gratitude", "Coffee with an old friend", "1"),
        make_reflection("2025-02-12T21:30:00+00:00", "hope", "Tomorrow feels lighter", "2"),
        make_reflection("2025-02-11T19:00:00+00:00", "patience", "Waited without fretting", "3"),
        make_reflection("2025-02-10T07:15:00+00:00", "growth", "Tried the new routine", "4"),
        make_reflection("2025-02-03T12:00:00+00:00", "reflection", "Long week", "5"),
        make_reflection("2025-02-02T12:00:00+00:00", "reflection", "Rest day", "6"),
    ]


@pytest.fixture
def populated_store(temp_dirs, sample_reflections):
    """ReflectionStore pre-filled with sample_reflections."""
    from journal.storage import ReflectionStore

    store = ReflectionStore(temp_dirs["reflections_dir"])
    paths = [store.save(r) for r in sample_reflections]
    return {"store": store, "paths": paths, "reflections": sample_reflections}
