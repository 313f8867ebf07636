# portfolio/analytics/duration.py

from datetime import datetime, timezone
from typing import Optional


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def calendar_difference(start: datetime, end: datetime) -> tuple[int, int, int]:
    """Whole (years, months, days) from ``start`` to ``end``, borrowing like a calendar."""
    if end < start:
        start, end = end, start

    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day or (end.day == start.day and end.time() < start.time()):
        months -= 1

    # anchor = start shifted forward by whole months, clamped to the month's last day
    year = start.year + (start.month - 1 + months) // 12
    month = (start.month - 1 + months) % 12 + 1
    day = min(start.day, _days_in_month(year, month))
    anchor = start.replace(year=year, month=month, day=day)

    days = (end - anchor).days
    return months // 12, months % 12, days


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        nxt = datetime(year + 1, 1, 1)
    else:
        nxt = datetime(year, month + 1, 1)
    return (nxt - datetime(year, month, 1)).days


def format_duration(start: datetime, end: Optional[datetime] = None, now: Optional[datetime] = None) -> str:
    """Human duration such as ``2 years 3 months``, ``5 months`` or ``12 days``. A missing end means now."""
    if end is None:
        end = now or datetime.now(timezone.utc)
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)

    years, months, days = calendar_difference(start, end)
    if years >= 1:
        return f"{_plural(years, 'year')} {_plural(months, 'month')}"
    if months >= 1:
        return _plural(months, "month")
    return _plural(days, "day")
