"""Calendar-day keys and week windows in the user's local timezone.

Everything here takes ``now`` and ``tz`` explicitly. ``now=None`` reads the
wall clock, ``tz=None`` means the host's local zone. Naive datetimes are
treated as local wall-clock time.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

EMPTY_DAY_KEY = ""


def get_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Resolve an IANA zone name. None/empty means host local time."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e


def to_local(dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Convert to an aware datetime in ``tz`` (host local if None)."""
    if dt.tzinfo is None:
        if tz is not None:
            return dt.replace(tzinfo=tz)
        return dt.astimezone()
    return dt.astimezone(tz)


def local_or_none(dt: Optional[datetime], tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Like ``to_local`` but None for missing or out-of-range datetimes."""
    if dt is None:
        return None
    try:
        return to_local(dt, tz)
    except (OverflowError, ValueError, OSError):
        return None


def resolve_now(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> datetime:
    """Current instant in local time, or the injected one."""
    if now is None:
        now = datetime.now(tz) if tz is not None else datetime.now().astimezone()
    return to_local(now, tz)


def parse_timestamp(value) -> Optional[datetime]:
    """Parse a stored timestamp. Returns None for anything unusable."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def to_date_key(value, tz: Optional[tzinfo] = None) -> str:
    """Turn a timestamp into ``YYYY-MM-DD`` for its local calendar day.

    Empty, null or unparseable input gives ``EMPTY_DAY_KEY`` instead of raising.
    """
    local = local_or_none(parse_timestamp(value), tz)
    if local is None:
        return EMPTY_DAY_KEY
    return local.date().isoformat()


def day_from_key(key: str) -> date:
    return date.fromisoformat(key)


def local_midnight(day: date, tz: Optional[tzinfo] = None) -> datetime:
    """Midnight at the start of ``day`` in local time (DST-aware)."""
    if tz is None:
        return datetime.combine(day, time.min).astimezone()
    return datetime.combine(day, time.min, tzinfo=tz)


def start_of_week(
    week_offset: int = 0,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> datetime:
    """Monday 00:00 local of the week ``week_offset`` weeks from the current one.

    If today is Monday that is the start; Sunday belongs to the week that began
    six days earlier.
    """
    today = resolve_now(now, tz).date()
    monday = today - timedelta(days=today.weekday())
    return local_midnight(monday + timedelta(weeks=week_offset), tz)


def week_window(
    week_offset: int = 0,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> tuple[datetime, datetime]:
    """Half-open ``[start, end)`` covering the seven local days of that week."""
    start = start_of_week(week_offset, now, tz)
    end = local_midnight(start.date() + timedelta(days=7), tz)
    return start, end


def weekday_index(dt: datetime) -> int:
    """Monday=0 .. Sunday=6."""
    return dt.weekday()


def format_day_label(day: date) -> str:
    """Short localized label such as ``Mon 3 Feb``."""
    return f"{day.strftime('%a')} {day.day} {day.strftime('%b')}"


def format_week_range(
    week_offset: int = 0,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    start = start_of_week(week_offset, now, tz).date()
    end = start + timedelta(days=6)
    return f"{format_day_label(start)} – {format_day_label(end)}"


def sort_timestamp(dt: Optional[datetime]) -> float:
    """Sortable epoch seconds; undated or out-of-range records sort oldest."""
    if dt is None:
        return float("-inf")
    try:
        return dt.timestamp()
    except (OverflowError, ValueError, OSError):
        return float("-inf")
