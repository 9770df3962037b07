"""SQLModel implementation of the payment repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, select

from ...models.payment import Payment


class SQLModelPaymentRepository:
    """SQLModel-based payment log."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def create(self, payment: Payment) -> Payment:
        """Persist a logged payment."""
        with self.session_factory() as session:
            session.add(payment)
            session.commit()
            session.refresh(payment)
            return payment

    def list_for_debt(self, debt_id: int) -> list[Payment]:
        """List payments for one debt, newest first."""
        with self.session_factory() as session:
            statement = (
                select(Payment)
                .where(Payment.debt_id == debt_id)
                .order_by(Payment.paid_on.desc())  # type: ignore
            )
            return list(session.exec(statement).all())

    def list_all(self) -> list[Payment]:
        with self.session_factory() as session:
            statement = select(Payment).order_by(Payment.paid_on.desc())  # type: ignore
            return list(session.exec(statement).all())
