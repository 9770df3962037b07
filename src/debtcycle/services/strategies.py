"""Payoff ordering policies (snowball, avalanche, hybrid).

Each policy takes debt snapshots and returns debt ids in the priority order
used for extra-cash allocation. Minimum payments apply to every debt
regardless of position. Policies never mutate their input.
"""

from __future__ import annotations

import math
from typing import Hashable, Iterable, Optional, Protocol, Sequence

DebtId = Hashable

QUICK_WIN_MAX_MONTHS = 2


class DebtSnapshot(Protocol):
    """Fields the ordering policies read from a debt."""

    id: DebtId
    balance: float
    monthly_payment: float
    apr: float


def _is_payable(debt: DebtSnapshot) -> bool:
    # Plain snapshots without an ``active`` flag are treated as active.
    return bool(getattr(debt, "active", True)) and debt.balance > 0


def active_debts(debts: Iterable[DebtSnapshot]) -> list[DebtSnapshot]:
    """Return the debts that are active and still carry a balance, in input order."""

    return [debt for debt in debts if _is_payable(debt)]


def snowball_order(debts: Iterable[DebtSnapshot]) -> list[DebtId]:
    """Smallest balance first; equal balances keep their input order."""

    return [debt.id for debt in sorted(active_debts(debts), key=lambda d: d.balance)]


def _avalanche_sort(debts: Sequence[DebtSnapshot]) -> list[DebtSnapshot]:
    return sorted(debts, key=lambda d: (-d.apr, d.balance))


def avalanche_order(debts: Iterable[DebtSnapshot]) -> list[DebtId]:
    """Highest APR first, ties broken by the smaller balance."""

    return [debt.id for debt in _avalanche_sort(active_debts(debts))]


def find_quick_win(debts: Iterable[DebtSnapshot], extra_cash: float) -> Optional[DebtSnapshot]:
    """Return the first debt clearable within two months, scanning in input order.

    A debt qualifies when ``ceil(balance / (monthly_payment + extra_cash)) <= 2``
    and its balance is at most two months of the total available cash
    (extra cash plus every active minimum). Debts with neither a minimum
    payment nor extra cash can never be cleared and are skipped.
    """

    candidates = active_debts(debts)
    available_per_month = extra_cash + sum(debt.monthly_payment for debt in candidates)

    for debt in candidates:
        monthly_funds = debt.monthly_payment + extra_cash
        if monthly_funds <= 0:
            continue
        months_to_clear = math.ceil(debt.balance / monthly_funds)
        if (
            months_to_clear <= QUICK_WIN_MAX_MONTHS
            and debt.balance <= available_per_month * QUICK_WIN_MAX_MONTHS
        ):
            return debt
    return None


def hybrid_order(debts: Iterable[DebtSnapshot], extra_cash: float) -> list[DebtId]:
    """Avalanche order with at most one quick win moved to the front."""

    candidates = active_debts(debts)
    quick_win = find_quick_win(candidates, extra_cash)
    if quick_win is None:
        return [debt.id for debt in _avalanche_sort(candidates)]

    remainder = [debt for debt in candidates if debt is not quick_win]
    return [quick_win.id, *(debt.id for debt in _avalanche_sort(remainder))]


__all__ = [
    "DebtId",
    "DebtSnapshot",
    "active_debts",
    "avalanche_order",
    "find_quick_win",
    "hybrid_order",
    "snowball_order",
]
