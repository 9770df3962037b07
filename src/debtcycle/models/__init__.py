"""SQLModel table exports."""

from .debt import Debt
from .payment import Payment
from .preferences import Preferences

__all__ = [
    "Debt",
    "Payment",
    "Preferences",
]
