"""Debt entities tracked by DebtCycle."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .payment import Payment


class Debt(SQLModel, table=True):
    """Installment or revolving debt with a monthly billing cycle."""

    __tablename__: ClassVar[str] = "debt"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=80, index=True)
    balance: float = Field(default=0.0, nullable=False, ge=0)
    monthly_payment: float = Field(default=0.0, nullable=False, ge=0)
    due_day: int = Field(default=1, ge=1, le=31)
    apr: float = Field(default=0.0, nullable=False, ge=0)
    active: bool = Field(default=True, nullable=False)
    paid_this_cycle: float = Field(default=0.0, nullable=False)
    next_due_date: date = Field(default_factory=date.today, nullable=False)
    autopay: bool = Field(default=False, nullable=False)

    payments: list["Payment"] = Relationship(
        back_populates="debt",
        sa_relationship=relationship(
            "Payment", back_populates="debt", cascade="all, delete-orphan"
        ),
    )

    @property
    def cycle_satisfied(self) -> bool:
        return self.paid_this_cycle >= self.monthly_payment

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "balance": self.balance,
            "monthly_payment": self.monthly_payment,
            "due_day": self.due_day,
            "apr": self.apr,
            "active": self.active,
            "paid_this_cycle": self.paid_this_cycle,
            "next_due_date": self.next_due_date.isoformat(),
            "autopay": self.autopay,
        }
