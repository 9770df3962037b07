"""Debt repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.debt import Debt


class DebtRepository(Protocol):
    """Repository for managing debt entities."""

    def get_by_id(self, debt_id: int) -> Optional[Debt]:
        """Retrieve a debt by ID."""
        ...

    def list_all(self) -> list[Debt]:
        """List all debts."""
        ...

    def list_active(self) -> list[Debt]:
        """List active debts with a positive balance."""
        ...

    def count(self) -> int:
        """Return the number of stored debts."""
        ...

    def create(self, debt: Debt) -> Debt:
        """Create a new debt."""
        ...

    def update(self, debt: Debt) -> Debt:
        """Update an existing debt."""
        ...

    def delete(self, debt_id: int) -> None:
        """Delete a debt by ID."""
        ...

    def replace_all(self, debts: list[Debt]) -> list[Debt]:
        """Remove every stored debt and persist ``debts`` in their place."""
        ...
