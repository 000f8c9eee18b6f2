"""Date utilities for ledger.

Pure functions for date keys, month arithmetic and week windows. Anything
that needs "today" receives it explicitly or through a Clock, so callers
can substitute a fixed time in tests.
"""

import calendar
from collections.abc import Callable
from datetime import date, datetime, timedelta

from ledger.domain.models import DateKey, MonthKey

Clock = Callable[[], datetime]

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def system_clock() -> datetime:
    """Return the current local time."""
    return datetime.now()


def date_key(d: date) -> DateKey:
    return DateKey(d.strftime("%Y-%m-%d"))


def parse_date_key(key: str) -> date:
    """Parse a YYYY-MM-DD key.

    Raises:
        ValueError: If the key is not a valid calendar date.
    """
    return datetime.strptime(key, "%Y-%m-%d").date()


def month_key(year: int, month: int) -> MonthKey:
    """Build a month key from a year and a 1-based month number."""
    return MonthKey(f"{year:04d}-{month:02d}")


def month_key_of(d: date) -> MonthKey:
    return month_key(d.year, d.month)


def parse_month_key(key: str) -> tuple[int, int]:
    """Parse a YYYY-MM key into (year, month).

    Raises:
        ValueError: If the key is not a valid month.
    """
    dt = datetime.strptime(key, "%Y-%m")
    return dt.year, dt.month


def days_in_month(key: MonthKey) -> int:
    year, month = parse_month_key(key)
    return calendar.monthrange(year, month)[1]


def month_range(key: MonthKey) -> tuple[str, str, str]:
    """Calculate date range and label for a month.

    Args:
        key: Month in YYYY-MM format.

    Returns:
        Tuple of (first_day, last_day, label) where:
        - first_day: First day of month (YYYY-MM-DD)
        - last_day: Last day of month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")
    """
    dt = datetime.strptime(key, "%Y-%m")
    first = dt.strftime("%Y-%m-01")
    last = f"{key}-{days_in_month(key):02d}"
    label = dt.strftime("%B %Y")
    return first, last, label


def shift_month(today: date, offset: int) -> MonthKey:
    """Month key `offset` months before the month containing `today`."""
    index = today.year * 12 + (today.month - 1) - offset
    return month_key(index // 12, index % 12 + 1)


def day_name(d: date) -> str:
    """Short day name with Sunday first (Python's weekday() starts on Monday)."""
    return DAY_NAMES[(d.weekday() + 1) % 7]


def week_start(today: date, offset: int = 0) -> date:
    """Most recent Sunday on or before `today`, moved back `offset` weeks."""
    days_since_sunday = (today.weekday() + 1) % 7
    return today - timedelta(days=days_since_sunday + 7 * offset)


def week_label(days: list[DateKey]) -> str:
    """Label a week window, e.g. "Mar 3 – Mar 9"."""
    first = parse_date_key(days[0])
    last = parse_date_key(days[-1])
    return f"{MONTH_NAMES[first.month - 1]} {first.day} – {MONTH_NAMES[last.month - 1]} {last.day}"


def day_label(d: date, today: date) -> str:
    """Label a day for display, e.g. "Today" or "Tue, Mar 5"."""
    if d == today:
        return "Today"
    return f"{day_name(d)}, {MONTH_NAMES[d.month - 1]} {d.day}"
