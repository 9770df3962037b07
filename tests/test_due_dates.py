"""Billing-cycle calendar helper tests."""

from __future__ import annotations

from datetime import date

import pytest

from debtcycle.services.due_dates import (
    add_months,
    days_until_due,
    is_date_in_range,
    next_due_date,
    next_week,
    this_month,
    this_week,
)


@pytest.mark.parametrize(
    ("due_day", "today", "expected"),
    [
        (15, date(2024, 3, 10), date(2024, 3, 15)),
        (15, date(2024, 3, 15), date(2024, 3, 15)),
        (15, date(2024, 3, 20), date(2024, 4, 15)),
        (31, date(2024, 4, 10), date(2024, 4, 30)),
        (30, date(2024, 1, 31), date(2024, 2, 29)),
        (5, date(2023, 12, 28), date(2024, 1, 5)),
    ],
)
def test_next_due_date(due_day, today, expected):
    assert next_due_date(due_day, today) == expected


@pytest.mark.parametrize(
    ("value", "months", "expected"),
    [
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 12, 15), 1, date(2024, 1, 15)),
        (date(2024, 3, 31), -1, date(2024, 2, 29)),
        (date(2024, 1, 10), -1, date(2023, 12, 10)),
        (date(2024, 5, 20), 12, date(2025, 5, 20)),
    ],
)
def test_add_months_clamps_to_month_end(value, months, expected):
    assert add_months(value, months) == expected


def test_week_windows_respect_week_start():
    wednesday = date(2024, 5, 15)

    assert this_week(wednesday, "mon") == (date(2024, 5, 13), date(2024, 5, 19))
    assert this_week(wednesday, "sun") == (date(2024, 5, 12), date(2024, 5, 18))
    assert next_week(wednesday, "mon") == (date(2024, 5, 20), date(2024, 5, 26))
    assert next_week(wednesday, "sun") == (date(2024, 5, 19), date(2024, 5, 25))


def test_week_start_on_the_first_day_itself():
    sunday = date(2024, 5, 12)

    assert this_week(sunday, "sun")[0] == sunday
    assert this_week(sunday, "mon") == (date(2024, 5, 6), date(2024, 5, 12))


def test_unknown_week_start_is_rejected():
    with pytest.raises(ValueError):
        this_week(date(2024, 5, 15), "sat")


def test_this_month_handles_leap_february():
    assert this_month(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_days_until_due_never_negative():
    today = date(2024, 5, 15)

    assert days_until_due(date(2024, 5, 20), today) == 5
    assert days_until_due(date(2024, 5, 15), today) == 0
    assert days_until_due(date(2024, 5, 1), today) == 0


def test_range_membership_is_inclusive():
    start, end = date(2024, 5, 1), date(2024, 5, 31)

    assert is_date_in_range(start, start, end)
    assert is_date_in_range(end, start, end)
    assert not is_date_in_range(date(2024, 6, 1), start, end)
