"""Expense model - one-off costs of owning the vehicle."""
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_expenses_amount_positive"),
        Index("idx_expenses_date", "date"),
    )

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Expense details
    type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Category: insurance, maintenance, parking, etc."
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ISO 8601 string exactly as submitted
    date: Mapped[str] = mapped_column(String(40), nullable=False)

    # Timestamps (naive UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Expense(id={self.id}, type='{self.type}', "
            f"amount={self.amount}, date='{self.date}')>"
        )
