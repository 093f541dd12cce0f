"""Refill model - fuel purchases with derived cost efficiency."""
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base


class Refill(Base):
    """Refill model."""

    __tablename__ = "refills"
    __table_args__ = (
        CheckConstraint("amount_spent > 0", name="ck_refills_amount_spent_positive"),
        CheckConstraint("distance_traveled > 0", name="ck_refills_distance_positive"),
        CheckConstraint("liters IS NULL OR liters > 0", name="ck_refills_liters_positive"),
        Index("idx_refills_date", "date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    amount_spent: Mapped[float] = mapped_column(Float, nullable=False)
    liters: Mapped[float | None] = mapped_column(Float, nullable=True)
    distance_traveled: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[str] = mapped_column(String(40), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Always amount_spent / distance_traveled, maintained by RefillService
    efficiency: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Cost per unit of distance"
    )

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Refill(id={self.id}, amount_spent={self.amount_spent}, "
            f"distance_traveled={self.distance_traveled}, efficiency={self.efficiency})>"
        )
