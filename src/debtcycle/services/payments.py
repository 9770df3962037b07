"""Payment logging and billing-cycle tracking."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from ..domain.repositories import DebtRepository, PaymentRepository
from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.payment import Payment
from .due_dates import add_months, next_due_date

logger = get_logger(__name__)


def apply_payment(
    debt: Debt,
    *,
    amount: float,
    paid_on: datetime | None = None,
    count_toward_cycle: bool = True,
) -> Payment:
    """Apply ``amount`` to ``debt`` in place and return the payment record.

    Counting a payment toward the cycle accumulates ``paid_this_cycle``; once it
    covers the monthly payment the due date moves to the next month and the
    cycle restarts. A debt paid down to zero becomes inactive.
    """

    if not math.isfinite(amount) or amount <= 0:
        raise ValueError("Payment amount must be a finite number greater than zero.")

    payment = Payment(
        debt_id=debt.id,
        amount=amount,
        paid_on=paid_on or datetime.now(timezone.utc),
        count_toward_cycle=count_toward_cycle,
    )

    debt.balance = max(0.0, debt.balance - amount)

    if count_toward_cycle:
        debt.paid_this_cycle += amount
        if debt.active and debt.paid_this_cycle >= debt.monthly_payment:
            debt.next_due_date = next_due_date(debt.due_day, add_months(debt.next_due_date, 1))
            debt.paid_this_cycle = 0.0

    if debt.balance <= 0:
        debt.balance = 0.0
        debt.active = False
        debt.paid_this_cycle = 0.0
    elif debt.monthly_payment > debt.balance:
        # The final cycle can never require more than what is still owed.
        if count_toward_cycle and debt.paid_this_cycle > debt.balance:
            debt.paid_this_cycle = debt.balance

    return payment


def log_payment(
    *,
    debt_repository: DebtRepository,
    payment_repository: PaymentRepository,
    debt_id: int,
    amount: float,
    paid_on: datetime | None = None,
    count_toward_cycle: bool = True,
) -> tuple[Debt, Payment]:
    """Record a payment against a stored debt and persist the updated debt."""

    debt = debt_repository.get_by_id(debt_id)
    if debt is None:
        raise LookupError(f"Debt {debt_id} not found")

    payment = apply_payment(
        debt, amount=amount, paid_on=paid_on, count_toward_cycle=count_toward_cycle
    )
    payment = payment_repository.create(payment)
    debt = debt_repository.update(debt)

    logger.info(
        "Payment logged",
        extra={
            "debt_id": debt_id,
            "amount": amount,
            "remaining_balance": debt.balance,
            "next_due_date": debt.next_due_date.isoformat(),
        },
    )
    if not debt.active and debt.autopay:
        logger.warning("Debt paid off with autopay still enabled", extra={"debt_id": debt_id})
    return debt, payment


__all__ = ["apply_payment", "log_payment"]
