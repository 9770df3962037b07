"""Upcoming-payment totals for the dashboard."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Iterable

from ..models.debt import Debt
from ..models.preferences import Preferences
from .due_dates import days_until_due, is_date_in_range, next_week, this_month, this_week


@dataclass(slots=True)
class DueTotals:
    """Minimum payments due in each window plus the outstanding balance."""

    this_week: float
    next_week: float
    this_month: float
    total_debt: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def estimated_year_total(debts: Iterable[Debt]) -> float:
    """Twelve months of minimum payments across active debts."""

    return sum(debt.monthly_payment * 12 for debt in debts if debt.active)


def calculate_due_totals(
    debts: Iterable[Debt], today: date, preferences: Preferences
) -> DueTotals:
    """Sum minimum payments falling due this week, next week and this month.

    Debts whose current cycle is already paid are left out until their due
    date arrives; on the due date itself (or once overdue) they count again.
    """

    active = [debt for debt in debts if debt.active]
    week = this_week(today, preferences.week_start)
    following_week = next_week(today, preferences.week_start)
    month = this_month(today)

    totals = DueTotals(this_week=0.0, next_week=0.0, this_month=0.0, total_debt=0.0)
    for debt in active:
        due = debt.next_due_date
        if debt.cycle_satisfied and days_until_due(due, today) > 0:
            continue

        if is_date_in_range(due, *week):
            totals.this_week += debt.monthly_payment
        if is_date_in_range(due, *following_week):
            totals.next_week += debt.monthly_payment
        if is_date_in_range(due, *month):
            totals.this_month += debt.monthly_payment

    totals.total_debt = sum(debt.balance for debt in active)
    return totals


__all__ = ["DueTotals", "calculate_due_totals", "estimated_year_total"]
