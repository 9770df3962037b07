"""Month-by-month payoff simulation.

``simulate`` works on its own copy of the supplied snapshots, so results from
different strategies or extra-cash amounts never share state and may be
computed concurrently. Amounts are plain floats and are never rounded.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from ..logging_config import get_logger
from .strategies import DebtId

logger = get_logger(__name__)

MAX_SIMULATION_MONTHS = 1000


class SimulationInputError(ValueError):
    """Raised when simulator inputs violate its preconditions."""


@dataclass(slots=True)
class SimulatedDebt:
    """Working state of one debt inside a simulation run."""

    id: DebtId
    balance: float
    monthly_payment: float
    apr: float


@dataclass(slots=True)
class MonthlyScheduleEntry:
    """Payments made in one simulated month, keyed by debt id."""

    month_index: int
    payments: dict[DebtId, float] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return sum(self.payments.values())


@dataclass(slots=True)
class SimulationResult:
    months_to_zero: int
    total_interest: float
    payoff_order: list[DebtId]
    first_payoff_in_months: int
    monthly_schedule: list[MonthlyScheduleEntry]
    interest_by_debt: dict[DebtId, float] = field(default_factory=dict)
    remaining_balance: float = 0.0

    @property
    def hit_month_cap(self) -> bool:
        """True when the run stopped at the safety cap with debt still outstanding."""
        return self.months_to_zero >= MAX_SIMULATION_MONTHS and self.remaining_balance > 0

    def payments_for(self, debt_id: DebtId) -> float:
        """Total paid toward ``debt_id`` across the whole schedule."""
        return sum(entry.payments.get(debt_id, 0.0) for entry in self.monthly_schedule)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation using the dashboard's camelCase keys."""
        return {
            "monthsToZero": self.months_to_zero,
            "totalInterest": self.total_interest,
            "payoffOrder": list(self.payoff_order),
            "firstPayoffInMonths": self.first_payoff_in_months,
            "hitMonthCap": self.hit_month_cap,
            "monthlySchedule": [
                {
                    "monthIndex": entry.month_index,
                    "payments": [
                        {"debt_id": debt_id, "amount": amount}
                        for debt_id, amount in entry.payments.items()
                    ],
                }
                for entry in self.monthly_schedule
            ],
        }


def apply_interest(balance: float, apr: float) -> float:
    """Return ``balance`` after one month of interest at ``apr`` percent per year."""

    if apr == 0:
        return balance
    return balance * (1 + apr / 100 / 12)


def validate_extra_cash(extra_cash: float) -> None:
    """Raise ``SimulationInputError`` unless ``extra_cash`` is finite and non-negative."""

    if not math.isfinite(extra_cash) or extra_cash < 0:
        raise SimulationInputError(f"extra_cash must be a finite number >= 0, got {extra_cash}")


def _validate(debts: Sequence[SimulatedDebt], payoff_order: Sequence[DebtId], extra_cash: float) -> None:
    validate_extra_cash(extra_cash)

    for debt in debts:
        for label, value in (("balance", debt.balance), ("APR", debt.apr), ("monthly payment", debt.monthly_payment)):
            if not math.isfinite(value):
                raise SimulationInputError(f"debt {debt.id!r} has a non-finite {label}")
        if debt.balance < 0:
            raise SimulationInputError(f"debt {debt.id!r} has a negative balance")
        if debt.apr < 0:
            raise SimulationInputError(f"debt {debt.id!r} has a negative APR")
        if debt.monthly_payment < 0:
            raise SimulationInputError(f"debt {debt.id!r} has a negative monthly payment")

    debt_ids = Counter(debt.id for debt in debts)
    order_ids = Counter(payoff_order)
    duplicated = {debt_id for debt_id, seen in (debt_ids | order_ids).items() if seen > 1}
    if duplicated:
        raise SimulationInputError(f"duplicate debt ids: {sorted(map(repr, duplicated))}")
    mismatched = set(debt_ids) ^ set(order_ids)
    if mismatched:
        raise SimulationInputError(
            f"payoff order and debts disagree on ids: {sorted(map(repr, mismatched))}"
        )


def simulate(
    debts: Sequence[SimulatedDebt], payoff_order: Sequence[DebtId], extra_cash: float
) -> SimulationResult:
    """Project monthly payments until every balance reaches zero.

    Each month accrues interest on every debt, then walks ``payoff_order``
    paying each debt its minimum and handing the month's ``extra_cash`` to
    debts in order until it runs out. The run stops once all balances are
    zero or after ``MAX_SIMULATION_MONTHS`` months, whichever comes first.

    Raises:
        SimulationInputError: ids in ``debts`` and ``payoff_order`` differ, or
            a balance, APR, minimum payment or ``extra_cash`` is negative or
            not finite.
    """

    _validate(debts, payoff_order, extra_cash)

    working = {debt.id: replace(debt) for debt in debts}
    order = list(payoff_order)
    interest_by_debt: dict[DebtId, float] = {debt_id: 0.0 for debt_id in working}
    total_interest = 0.0
    schedule: list[MonthlyScheduleEntry] = []
    first_payoff: int | None = None
    month = 0

    logger.debug(
        "Starting payoff simulation",
        extra={"debts": len(working), "extra_cash": extra_cash, "payoff_order": order},
    )

    def _all_paid() -> bool:
        return all(debt.balance <= 0 for debt in working.values())

    while not _all_paid() and month < MAX_SIMULATION_MONTHS:
        for debt in working.values():
            accrued = apply_interest(debt.balance, debt.apr)
            interest = accrued - debt.balance
            debt.balance = accrued
            interest_by_debt[debt.id] += interest
            total_interest += interest

        entry = MonthlyScheduleEntry(month_index=month)
        remaining_extra = extra_cash

        for debt_id in order:
            debt = working[debt_id]
            if debt.balance <= 0:
                continue

            payment = min(debt.monthly_payment, debt.balance)
            debt.balance -= payment
            if payment > 0:
                entry.payments[debt_id] = payment

            if remaining_extra > 0 and debt.balance > 0:
                extra = min(remaining_extra, debt.balance)
                debt.balance -= extra
                remaining_extra -= extra
                entry.payments[debt_id] = entry.payments.get(debt_id, 0.0) + extra

            if debt.balance <= 0 and first_payoff is None:
                first_payoff = month + 1

        if entry.payments:
            schedule.append(entry)
        month += 1

    remaining = sum(max(debt.balance, 0.0) for debt in working.values())
    if remaining > 0:
        logger.warning(
            "Payoff simulation hit the %d month cap",
            MAX_SIMULATION_MONTHS,
            extra={"remaining_balance": remaining, "payoff_order": order},
        )

    return SimulationResult(
        months_to_zero=month,
        total_interest=total_interest,
        payoff_order=order,
        first_payoff_in_months=first_payoff if first_payoff is not None else month,
        monthly_schedule=schedule,
        interest_by_debt=interest_by_debt,
        remaining_balance=remaining,
    )


__all__ = [
    "MAX_SIMULATION_MONTHS",
    "MonthlyScheduleEntry",
    "SimulatedDebt",
    "SimulationInputError",
    "SimulationResult",
    "apply_interest",
    "simulate",
    "validate_extra_cash",
]
