"""Weekly per-theme reflection counts on a Monday-start week."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo
from typing import Iterable, Optional

from shared_types import THEME_KEYS, Theme

from .dates import format_week_range, local_or_none, start_of_week, week_window, weekday_index
from .models import Reflection

DAY_LABELS = ("M", "T", "W", "T", "F", "S", "S")


def empty_week() -> list[dict[Theme, int]]:
    return [{t: 0 for t in THEME_KEYS} for _ in range(7)]


def get_week_data_by_theme(
    reflections: Iterable[Reflection],
    week_offset: int = 0,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> list[dict[Theme, int]]:
    """Per day (0=Mon..6=Sun), count per theme for the week at ``week_offset``.

    0 is this week, -1 last week. Undated reflections and unknown themes count
    nowhere.
    """
    start, end = week_window(week_offset, now, tz)
    out = empty_week()
    for r in reflections:
        theme = r.theme_key
        if theme is None:
            continue
        local = local_or_none(r.date, tz)
        if local is None or local < start or local >= end:
            continue
        out[weekday_index(local)][theme] += 1
    return out


def get_earliest_week_offset(
    reflections: Iterable[Reflection],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> int:
    """Week offset holding the oldest dated reflection (0 when none)."""
    dates = [d for d in (local_or_none(r.date, tz) for r in reflections) if d is not None]
    if not dates:
        return 0
    start_of_current = start_of_week(0, now, tz)
    weeks = (min(dates) - start_of_current) / timedelta(weeks=1)
    return min(0, math.floor(weeks))


@dataclass
class WeekView:
    """One page of the weekly chart plus what the navigation needs."""

    week_offset: int
    days: list[dict[Theme, int]]
    label: str
    is_current_week: bool
    is_earliest_week: bool
    day_labels: tuple[str, ...] = field(default=DAY_LABELS)

    @property
    def totals(self) -> list[int]:
        return [sum(day.values()) for day in self.days]

    @property
    def max_bar(self) -> int:
        return max(1, *self.totals)

    @property
    def has_data(self) -> bool:
        return any(self.totals)

    @property
    def can_go_back(self) -> bool:
        return not self.is_earliest_week

    @property
    def can_go_forward(self) -> bool:
        return not self.is_current_week

    def theme_totals(self) -> dict[Theme, int]:
        return {t: sum(day[t] for day in self.days) for t in THEME_KEYS}


def build_week_view(
    reflections: Iterable[Reflection],
    week_offset: int = 0,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> WeekView:
    """Chart data for ``week_offset``. Future offsets are clamped to this week."""
    reflections = list(reflections)
    week_offset = min(0, week_offset)
    earliest = get_earliest_week_offset(reflections, now, tz)
    return WeekView(
        week_offset=week_offset,
        days=get_week_data_by_theme(reflections, week_offset, now, tz),
        label=format_week_range(week_offset, now, tz),
        is_current_week=week_offset == 0,
        is_earliest_week=week_offset <= earliest,
    )
