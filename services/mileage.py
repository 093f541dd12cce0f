"""Mileage service: cumulative distance over time."""
import logging
from typing import List

from sqlalchemy import select, union_all
from sqlalchemy.ext.asyncio import AsyncSession

from core.entities import MileagePoint
from database.models import Refill, Trip

logger = logging.getLogger(__name__)


class MileageService:
    """Read-side aggregation over trips and refills."""

    def __init__(self, session: AsyncSession):
        """Initialize mileage service with database session."""
        self.session = session

    async def get_mileage_over_time(self) -> List[MileagePoint]:
        """
        Build the mileage series.

        Trip distances and refill distances are merged, sorted by date
        (earliest first) and prefix-summed. Nothing is cached: the series is
        recomputed on every call.

        Returns:
            One point per trip and per refill; empty when both tables are empty
        """
        events = union_all(
            select(Trip.date.label("date"), Trip.distance.label("distance")),
            select(Refill.date.label("date"), Refill.distance_traveled.label("distance")),
        ).subquery()

        result = await self.session.execute(
            select(events.c.date, events.c.distance).order_by(events.c.date.asc())
        )

        points: List[MileagePoint] = []
        cumulative = 0.0
        for row in result.all():
            cumulative += row.distance
            points.append(MileagePoint(date=row.date, cumulative_distance=cumulative))

        logger.debug(f"Mileage series built from {len(points)} events")
        return points
