"""Calendar helpers for monthly billing cycles."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

WEEK_STARTS = {"mon": 0, "sun": 6}


def _last_day(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int) -> date:
    """Shift ``value`` by whole months, clamping to the last day of the target month."""

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, min(value.day, _last_day(year, month)))


def next_due_date(due_day: int, today: date) -> date:
    """Return the next occurrence of ``due_day`` on or after ``today``.

    Months shorter than ``due_day`` use their last day, so a due day of 31
    falls on Feb 28/29, Apr 30 and so on.
    """

    candidate = date(today.year, today.month, min(due_day, _last_day(today.year, today.month)))
    if candidate < today:
        following = add_months(date(today.year, today.month, 1), 1)
        return following.replace(day=min(due_day, _last_day(following.year, following.month)))
    return candidate


def _week_start(today: date, week_start: str) -> date:
    try:
        first_weekday = WEEK_STARTS[week_start]
    except KeyError:
        raise ValueError(f"week_start must be 'mon' or 'sun', got {week_start!r}") from None
    offset = (today.weekday() - first_weekday) % 7
    return today - timedelta(days=offset)


def this_week(today: date, week_start: str = "mon") -> tuple[date, date]:
    """Inclusive (start, end) of the week containing ``today``."""

    start = _week_start(today, week_start)
    return start, start + timedelta(days=6)


def next_week(today: date, week_start: str = "mon") -> tuple[date, date]:
    start = _week_start(today, week_start) + timedelta(days=7)
    return start, start + timedelta(days=6)


def this_month(today: date) -> tuple[date, date]:
    return today.replace(day=1), today.replace(day=_last_day(today.year, today.month))


def days_until_due(due: date, today: date) -> int:
    """Whole days from ``today`` to ``due``; overdue dates count as 0."""

    return max(0, (due - today).days)


def is_date_in_range(value: date, start: date, end: date) -> bool:
    return start <= value <= end


__all__ = [
    "add_months",
    "days_until_due",
    "is_date_in_range",
    "next_due_date",
    "next_week",
    "this_month",
    "this_week",
]
