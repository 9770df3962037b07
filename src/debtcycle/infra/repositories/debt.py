"""SQLModel implementation of the debt repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.debt import Debt


class SQLModelDebtRepository:
    """SQLModel-based debt repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, debt_id: int) -> Optional[Debt]:
        """Retrieve a debt by ID."""
        with self.session_factory() as session:
            return session.get(Debt, debt_id)

    def list_all(self) -> list[Debt]:
        """List all debts in insertion order."""
        with self.session_factory() as session:
            statement = select(Debt).order_by(Debt.id)  # type: ignore
            return list(session.exec(statement).all())

    def list_active(self) -> list[Debt]:
        """List active debts with a positive balance."""
        with self.session_factory() as session:
            statement = (
                select(Debt)
                .where(Debt.active == True)  # noqa: E712
                .where(Debt.balance > 0)
                .order_by(Debt.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def count(self) -> int:
        with self.session_factory() as session:
            return int(session.exec(select(func.count()).select_from(Debt)).one())

    def create(self, debt: Debt) -> Debt:
        """Create a new debt."""
        with self.session_factory() as session:
            session.add(debt)
            session.commit()
            session.refresh(debt)
            return debt

    def update(self, debt: Debt) -> Debt:
        """Update an existing debt."""
        with self.session_factory() as session:
            session.add(debt)
            session.commit()
            session.refresh(debt)
            return debt

    def delete(self, debt_id: int) -> None:
        """Delete a debt and its payment log."""
        with self.session_factory() as session:
            debt = session.get(Debt, debt_id)
            if debt:
                session.delete(debt)
                session.commit()

    def replace_all(self, debts: list[Debt]) -> list[Debt]:
        with self.session_factory() as session:
            for existing in session.exec(select(Debt)).all():
                session.delete(existing)
            session.flush()
            for debt in debts:
                session.add(debt)
            session.commit()
            for debt in debts:
                session.refresh(debt)
            return debts
