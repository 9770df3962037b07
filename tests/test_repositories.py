"""Unit tests for repository implementations."""

from __future__ import annotations

from datetime import date, datetime

from debtcycle.models import Debt, Payment, Preferences


def test_debt_repository_crud(debt_factory, debt_repository):
    card = debt_factory(name="Card", balance=1200.0)
    loan = debt_factory(name="Loan", balance=8000.0, apr=6.0)

    assert debt_repository.count() == 2
    assert [d.name for d in debt_repository.list_all()] == ["Card", "Loan"]

    fetched = debt_repository.get_by_id(card.id)
    assert fetched is not None
    assert fetched.name == "Card"

    fetched.balance = 900.0
    debt_repository.update(fetched)
    assert debt_repository.get_by_id(card.id).balance == 900.0

    debt_repository.delete(loan.id)
    assert debt_repository.get_by_id(loan.id) is None
    assert debt_repository.count() == 1


def test_list_active_excludes_inactive_and_zero_balances(debt_factory, debt_repository):
    debt_factory(name="Open", balance=100.0)
    debt_factory(name="Closed", balance=100.0, active=False)
    debt_factory(name="Cleared", balance=0.0)

    assert [d.name for d in debt_repository.list_active()] == ["Open"]


def test_replace_all_drops_existing_debts_and_payments(
    debt_factory, debt_repository, payment_repository
):
    old = debt_factory(name="Old")
    payment_repository.create(
        Payment(debt_id=old.id, amount=25.0, paid_on=datetime(2024, 1, 2), count_toward_cycle=True)
    )

    replaced = debt_repository.replace_all(
        [Debt(name="New", balance=50.0, monthly_payment=10.0, next_due_date=date(2024, 2, 1))]
    )

    assert [d.name for d in debt_repository.list_all()] == ["New"]
    assert replaced[0].id is not None
    assert payment_repository.list_all() == []


def test_payment_repository_orders_newest_first(debt_factory, payment_repository):
    debt = debt_factory()
    for day in (3, 10, 7):
        payment_repository.create(
            Payment(debt_id=debt.id, amount=float(day), paid_on=datetime(2024, 4, day))
        )

    assert [p.amount for p in payment_repository.list_for_debt(debt.id)] == [10.0, 7.0, 3.0]
    assert payment_repository.list_for_debt(debt.id + 1) == []


def test_preferences_default_then_saved(preferences_repository):
    defaults = preferences_repository.get()
    assert defaults.strategy == "hybrid"
    assert defaults.extra_cash == 0.0
    assert defaults.week_start == "mon"

    preferences_repository.save(Preferences(strategy="snowball", extra_cash=125.0, week_start="sun"))
    preferences_repository.save(Preferences(strategy="avalanche", extra_cash=50.0))

    stored = preferences_repository.get()
    assert stored.strategy == "avalanche"
    assert stored.extra_cash == 50.0
    assert stored.week_start == "mon"
