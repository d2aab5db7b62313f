"""Summary numbers for the growth view."""

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Iterable, Optional

from shared_types import THEME_KEYS, Theme

from .dates import local_or_none, resolve_now, sort_timestamp
from .models import Reflection
from .streak import get_current_streak, get_longest_streak

ROLLING_WEEK = timedelta(days=7)


@dataclass(frozen=True)
class ReflectionStats:
    total: int
    this_week: int
    total_words: int
    current_streak: int
    longest_streak: int

    def to_dict(self) -> dict:
        return asdict(self)


def get_reflections_this_week(
    reflections: Iterable[Reflection],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> int:
    """Reflections in the trailing 7 days (rolling, not Monday-aligned)."""
    current = resolve_now(now, tz)
    week_ago = current - ROLLING_WEEK
    dates = (local_or_none(r.date, tz) for r in reflections)
    return sum(1 for d in dates if d is not None and d >= week_ago)


def get_total_words(reflections: Iterable[Reflection]) -> int:
    return sum(r.word_count for r in reflections)


def compute_stats(
    reflections: Iterable[Reflection],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> ReflectionStats:
    """Recompute every summary value from the full collection."""
    reflections = list(reflections)
    now = resolve_now(now, tz)
    return ReflectionStats(
        total=len(reflections),
        this_week=get_reflections_this_week(reflections, now, tz),
        total_words=get_total_words(reflections),
        current_streak=get_current_streak(reflections, now, tz),
        longest_streak=get_longest_streak(reflections, tz),
    )


def theme_counts(reflections: Iterable[Reflection]) -> dict[str, int]:
    """Count per recognized theme plus ``all``.

    ``all`` is the raw record count, so reflections with an unknown theme are
    in ``all`` but in no per-theme bucket.
    """
    counts: dict[str, int] = {t.value: 0 for t in THEME_KEYS}
    total = 0
    for r in reflections:
        total += 1
        theme = r.theme_key
        if theme is not None:
            counts[theme.value] += 1
    counts["all"] = total
    return counts


def filter_by_theme(
    reflections: Iterable[Reflection], theme: Optional[str | Theme] = None
) -> list[Reflection]:
    """Reflections matching ``theme`` (all when None), newest first."""
    selected = [r for r in reflections if theme is None or r.theme == str(theme)]
    return sorted(selected, key=lambda r: sort_timestamp(r.date), reverse=True)
