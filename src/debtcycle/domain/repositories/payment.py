"""Payment repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...models.payment import Payment


class PaymentRepository(Protocol):
    """Repository for the payment log."""

    def create(self, payment: Payment) -> Payment:
        """Persist a logged payment."""
        ...

    def list_for_debt(self, debt_id: int) -> list[Payment]:
        """List payments for one debt, newest first."""
        ...

    def list_all(self) -> list[Payment]:
        """List every logged payment, newest first."""
        ...
