"""Logged payments against a debt."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .debt import Debt


class Payment(SQLModel, table=True):
    __tablename__: ClassVar[str] = "payment"

    id: Optional[int] = Field(default=None, primary_key=True)
    debt_id: int = Field(foreign_key="debt.id", nullable=False, index=True)
    amount: float = Field(nullable=False)
    paid_on: datetime = Field(nullable=False, index=True)
    count_toward_cycle: bool = Field(default=True, nullable=False)

    debt: "Debt" = Relationship(
        sa_relationship=relationship("Debt", back_populates="payments")
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "debt_id": self.debt_id,
            "amount": self.amount,
            "paid_on": self.paid_on.isoformat(),
            "count_toward_cycle": self.count_toward_cycle,
        }
