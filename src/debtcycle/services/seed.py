"""Sample data used for demos and first-run onboarding."""

from __future__ import annotations

from datetime import date

from ..domain.repositories import DebtRepository, PreferencesRepository
from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.preferences import Preferences
from .due_dates import next_due_date

logger = get_logger(__name__)

_SAMPLE_DEBTS = (
    # name, balance, monthly_payment, due_day, apr, autopay
    ("Credit Card A", 5000.0, 150.0, 15, 24.99, False),
    ("Student Loan", 15000.0, 300.0, 5, 6.5, True),
    ("Car Loan", 12000.0, 400.0, 22, 5.75, True),
    ("Credit Card B", 2500.0, 75.0, 28, 18.99, False),
)


def default_preferences() -> Preferences:
    return Preferences()


def sample_debts(today: date | None = None) -> list[Debt]:
    """Return unsaved demo debts with due dates anchored to ``today``."""

    anchor = today or date.today()
    return [
        Debt(
            name=name,
            balance=balance,
            monthly_payment=monthly_payment,
            due_day=due_day,
            apr=apr,
            active=True,
            paid_this_cycle=0.0,
            next_due_date=next_due_date(due_day, anchor),
            autopay=autopay,
        )
        for name, balance, monthly_payment, due_day, apr, autopay in _SAMPLE_DEBTS
    ]


def seed_sample_data(
    *,
    debt_repository: DebtRepository,
    preferences_repository: PreferencesRepository,
    today: date | None = None,
) -> list[Debt]:
    """Replace stored debts with the demo set and reset preferences."""

    debts = debt_repository.replace_all(sample_debts(today))
    preferences_repository.save(default_preferences())
    logger.info("Seeded sample data", extra={"debts": len(debts)})
    return debts


__all__ = ["default_preferences", "sample_debts", "seed_sample_data"]
