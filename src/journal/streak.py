"""Streak logic: one reflection per calendar day counts as one day.

Multiple reflections on the same day still count as a single day. Days are
compared as calendar dates, so a 23- or 25-hour DST day is still one day.
"""

from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from .dates import EMPTY_DAY_KEY, day_from_key, resolve_now, to_date_key
from .models import Reflection


def unique_reflection_days(
    reflections: Iterable[Reflection], tz: Optional[tzinfo] = None
) -> list[str]:
    """Sorted day keys (YYYY-MM-DD) that have at least one reflection."""
    days = {to_date_key(r.date, tz) for r in reflections}
    days.discard(EMPTY_DAY_KEY)
    return sorted(days)


def _is_next_day(prev: date, curr: date) -> bool:
    return curr.toordinal() - prev.toordinal() <= 1


def longest_run(day_keys: Iterable[str]) -> int:
    """Longest run of consecutive calendar days among ``day_keys``."""
    days = sorted({k for k in day_keys if k != EMPTY_DAY_KEY})
    if not days:
        return 0

    best = current = 1
    prev = day_from_key(days[0])
    for key in days[1:]:
        curr = day_from_key(key)
        if _is_next_day(prev, curr):
            current += 1
        else:
            best = max(best, current)
            current = 1
        prev = curr
    return max(best, current)


def current_run(day_keys: Iterable[str], today: str) -> int:
    """Consecutive days ending on ``today``; 0 if today has no entry."""
    days = sorted({k for k in day_keys if k != EMPTY_DAY_KEY})
    if today not in days:
        return 0

    count = 0
    prev = day_from_key(today)
    for key in reversed(days[: days.index(today) + 1]):
        curr = day_from_key(key)
        if not _is_next_day(curr, prev):
            break
        count += 1
        prev = curr
    return count


def get_current_streak(
    reflections: Iterable[Reflection],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> int:
    """Days in a row up to and including today. Yesterday alone gives 0."""
    today = resolve_now(now, tz).date().isoformat()
    return current_run(unique_reflection_days(reflections, tz), today)


def get_longest_streak(reflections: Iterable[Reflection], tz: Optional[tzinfo] = None) -> int:
    """Longest run of consecutive days with a reflection, over all time."""
    return longest_run(unique_reflection_days(reflections, tz))
