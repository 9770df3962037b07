"""SQLModel repository implementations."""

from .debt import SQLModelDebtRepository
from .payment import SQLModelPaymentRepository
from .preferences import SQLModelPreferencesRepository

__all__ = [
    "SQLModelDebtRepository",
    "SQLModelPaymentRepository",
    "SQLModelPreferencesRepository",
]
