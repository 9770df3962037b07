"""Repository protocols consumed by the service layer."""

from .debt import DebtRepository
from .payment import PaymentRepository
from .preferences import PreferencesRepository

__all__ = [
    "DebtRepository",
    "PaymentRepository",
    "PreferencesRepository",
]
