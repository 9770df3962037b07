"""Service module exports."""

from . import due_dates, estimates, payments, planner, seed, simulator, strategies

__all__ = [
    "due_dates",
    "estimates",
    "payments",
    "planner",
    "seed",
    "simulator",
    "strategies",
]
