"""User preferences stored as a single database row."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

PREFERENCES_ROW_ID = 1


class Preferences(SQLModel, table=True):
    """Display and payoff-planning options.

    Only one row (``id == PREFERENCES_ROW_ID``) is ever stored.
    """

    __tablename__: ClassVar[str] = "preferences"

    id: Optional[int] = Field(default=PREFERENCES_ROW_ID, primary_key=True)
    week_start: str = Field(default="mon", max_length=3)  # mon | sun
    currency: str = Field(default="USD", max_length=3)
    theme: str = Field(default="dark", max_length=8)  # dark | light
    show_next_month_preview: bool = Field(default=False)
    strategy: str = Field(default="hybrid", max_length=16)  # snowball | avalanche | hybrid
    extra_cash: float = Field(default=0.0, ge=0)

    def to_dict(self) -> dict:
        return {
            "week_start": self.week_start,
            "currency": self.currency,
            "theme": self.theme,
            "show_next_month_preview": self.show_next_month_preview,
            "strategy": self.strategy,
            "extra_cash": self.extra_cash,
        }
