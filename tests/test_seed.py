"""Sample data tests."""

from __future__ import annotations

from datetime import date

from debtcycle.models import Preferences
from debtcycle.services.seed import sample_debts, seed_sample_data


def test_sample_debts_anchor_due_dates_to_today():
    debts = sample_debts(date(2024, 5, 20))

    assert [d.name for d in debts] == ["Credit Card A", "Student Loan", "Car Loan", "Credit Card B"]
    by_name = {d.name: d for d in debts}
    assert by_name["Credit Card A"].next_due_date == date(2024, 6, 15)
    assert by_name["Car Loan"].next_due_date == date(2024, 5, 22)
    assert by_name["Student Loan"].autopay is True
    assert all(d.active and d.paid_this_cycle == 0.0 for d in debts)


def test_seed_replaces_existing_data(debt_factory, debt_repository, preferences_repository):
    debt_factory(name="Leftover")
    preferences_repository.save(Preferences(strategy="snowball", extra_cash=300.0))

    seeded = seed_sample_data(
        debt_repository=debt_repository,
        preferences_repository=preferences_repository,
        today=date(2024, 5, 20),
    )

    assert len(seeded) == 4
    assert "Leftover" not in {d.name for d in debt_repository.list_all()}
    preferences = preferences_repository.get()
    assert preferences.strategy == "hybrid"
    assert preferences.extra_cash == 0.0
