"""Strategy selection and simulation entry points used by the API and CLI."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable

from ..domain.repositories import DebtRepository, PreferencesRepository
from ..logging_config import get_logger
from .simulator import SimulatedDebt, SimulationResult, simulate, validate_extra_cash
from .strategies import DebtId, DebtSnapshot, active_debts, avalanche_order, hybrid_order, snowball_order

logger = get_logger(__name__)


class Strategy(str, Enum):
    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, value: "str | Strategy") -> "Strategy":
        """Return the strategy for ``value`` (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Invalid debt payoff strategy {value!r}; expected one of {choices}.") from None


OrderingPolicy = Callable[[list[DebtSnapshot], float], list[DebtId]]

ORDERING_POLICIES: dict[Strategy, OrderingPolicy] = {
    Strategy.SNOWBALL: lambda debts, extra_cash: snowball_order(debts),
    Strategy.AVALANCHE: lambda debts, extra_cash: avalanche_order(debts),
    Strategy.HYBRID: hybrid_order,
}


def payoff_order(
    strategy: "Strategy | str", debts: Iterable[DebtSnapshot], extra_cash: float = 0.0
) -> list[DebtId]:
    """Dispatch to the ordering policy registered for ``strategy``."""

    policy = ORDERING_POLICIES[Strategy.parse(strategy)]
    return policy(list(debts), extra_cash)


def snapshot_debts(debts: Iterable[DebtSnapshot]) -> list[SimulatedDebt]:
    """Copy active, non-zero debts into fresh simulation state."""

    return [
        SimulatedDebt(
            id=debt.id,
            balance=float(debt.balance),
            monthly_payment=float(debt.monthly_payment),
            apr=float(debt.apr),
        )
        for debt in active_debts(debts)
    ]


def simulate_strategy(
    debts: Iterable[DebtSnapshot], strategy: "Strategy | str", extra_cash: float = 0.0
) -> SimulationResult:
    """Order active debts with ``strategy`` and run the payoff simulation."""

    validate_extra_cash(extra_cash)
    candidates = active_debts(debts)
    order = payoff_order(strategy, candidates, extra_cash)
    return simulate(snapshot_debts(candidates), order, extra_cash)


def compare_strategies(
    debts: Iterable[DebtSnapshot], extra_cash: float = 0.0
) -> dict[Strategy, SimulationResult]:
    """Run every strategy independently over the same debts."""

    candidates = active_debts(debts)
    return {
        strategy: simulate_strategy(candidates, strategy, extra_cash) for strategy in Strategy
    }


def plan_from_store(
    *, debt_repository: DebtRepository, preferences_repository: PreferencesRepository
) -> tuple[Strategy, SimulationResult]:
    """Simulate stored active debts with the stored strategy and extra cash."""

    preferences = preferences_repository.get()
    strategy = Strategy.parse(preferences.strategy)
    debts = debt_repository.list_active()
    result = simulate_strategy(debts, strategy, preferences.extra_cash)
    logger.info(
        "Computed payoff plan",
        extra={
            "strategy": strategy.value,
            "extra_cash": preferences.extra_cash,
            "months_to_zero": result.months_to_zero,
        },
    )
    return strategy, result


__all__ = [
    "ORDERING_POLICIES",
    "Strategy",
    "compare_strategies",
    "payoff_order",
    "plan_from_store",
    "simulate_strategy",
    "snapshot_debts",
]
