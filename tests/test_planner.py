"""Strategy dispatch and planning tests."""

from __future__ import annotations

from datetime import date

import pytest

from debtcycle.models import Debt, Preferences
from debtcycle.services.planner import (
    ORDERING_POLICIES,
    Strategy,
    compare_strategies,
    payoff_order,
    plan_from_store,
    simulate_strategy,
    snapshot_debts,
)
from debtcycle.services.simulator import SimulationInputError


def _debt(id: int, name: str, balance: float, monthly_payment: float, apr: float, active: bool = True) -> Debt:
    return Debt(
        id=id,
        name=name,
        balance=balance,
        monthly_payment=monthly_payment,
        apr=apr,
        active=active,
        due_day=1,
        next_due_date=date(2024, 1, 1),
    )


@pytest.fixture
def debts() -> list[Debt]:
    return [
        _debt(1, "Credit Card A", 5000.0, 150.0, 24.99),
        _debt(2, "Student Loan", 15000.0, 300.0, 6.5),
        _debt(3, "Car Loan", 12000.0, 400.0, 5.75),
        _debt(4, "Credit Card B", 2500.0, 75.0, 18.99),
        _debt(5, "Closed Card", 800.0, 40.0, 29.99, active=False),
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("snowball", Strategy.SNOWBALL),
        ("Avalanche", Strategy.AVALANCHE),
        (" HYBRID ", Strategy.HYBRID),
        (Strategy.HYBRID, Strategy.HYBRID),
    ],
)
def test_strategy_parse(raw, expected):
    assert Strategy.parse(raw) is expected


def test_strategy_parse_rejects_unknown_tags():
    with pytest.raises(ValueError, match="Invalid debt payoff strategy"):
        Strategy.parse("tsunami")


def test_every_strategy_has_an_ordering_policy():
    assert set(ORDERING_POLICIES) == set(Strategy)


def test_payoff_order_dispatches_by_strategy(debts):
    assert payoff_order("snowball", debts) == [4, 1, 3, 2]
    assert payoff_order(Strategy.AVALANCHE, debts) == [1, 4, 2, 3]
    assert payoff_order("hybrid", debts, extra_cash=0.0) == [1, 4, 2, 3]


def test_snapshot_debts_filters_and_copies(debts):
    snapshots = snapshot_debts(debts)

    assert [s.id for s in snapshots] == [1, 2, 3, 4]
    snapshots[0].balance = 0.0
    assert debts[0].balance == 5000.0


def test_simulate_strategy_ignores_inactive_debts(debts):
    result = simulate_strategy(debts, "avalanche", extra_cash=200.0)

    assert result.payoff_order == [1, 4, 2, 3]
    assert all(5 not in entry.payments for entry in result.monthly_schedule)
    assert result.hit_month_cap is False


def test_extra_cash_shortens_the_plan(debts):
    baseline = simulate_strategy(debts, "snowball", extra_cash=0.0)
    boosted = simulate_strategy(debts, "snowball", extra_cash=500.0)

    assert boosted.months_to_zero < baseline.months_to_zero
    assert boosted.total_interest < baseline.total_interest


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("extra_cash", [float("nan"), float("inf"), -5.0])
def test_invalid_extra_cash_is_rejected_before_ordering(debts, strategy, extra_cash):
    with pytest.raises(SimulationInputError):
        simulate_strategy(debts, strategy, extra_cash)

def test_compare_strategies_runs_each_strategy_independently(debts):
    results = compare_strategies(debts, extra_cash=250.0)

    assert set(results) == set(Strategy)
    assert results[Strategy.SNOWBALL].payoff_order == [4, 1, 3, 2]
    assert results[Strategy.AVALANCHE].payoff_order == [1, 4, 2, 3]
    assert results[Strategy.SNOWBALL] is not results[Strategy.AVALANCHE]
    # Each run starts from the same balances.
    for result in results.values():
        total_paid = sum(entry.total for entry in result.monthly_schedule)
        assert total_paid == pytest.approx(34500.0 + result.total_interest)


def test_compare_with_no_debts_returns_trivial_results():
    results = compare_strategies([], extra_cash=100.0)

    assert all(result.months_to_zero == 0 for result in results.values())


def test_plan_from_store_uses_saved_preferences(debt_factory, debt_repository, preferences_repository):
    debt_factory(name="Small", balance=300.0, monthly_payment=50.0, apr=10.0)
    debt_factory(name="Hot", balance=3000.0, monthly_payment=90.0, apr=27.0)
    preferences_repository.save(Preferences(strategy="avalanche", extra_cash=100.0))

    strategy, result = plan_from_store(
        debt_repository=debt_repository, preferences_repository=preferences_repository
    )

    hot = next(d for d in debt_repository.list_all() if d.name == "Hot")
    assert strategy is Strategy.AVALANCHE
    assert result.payoff_order[0] == hot.id
    assert result.months_to_zero > 0
