"""Trip model - distance driven."""
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from database.base import Base


class Trip(Base):
    """Trip model."""

    __tablename__ = "trips"
    __table_args__ = (
        CheckConstraint("distance > 0", name="ck_trips_distance_positive"),
        Index("idx_trips_date", "date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    distance: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[str] = mapped_column(String(40), nullable=False)
    purpose: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Trip(id={self.id}, distance={self.distance}, date='{self.date}')>"
