"""Repository for Trip model operations."""
from datetime import datetime
from typing import Optional

from sqlalchemy import select, func

from database.models.trip import Trip
from database.repositories.base import BaseRepository


class TripRepository(BaseRepository[Trip]):
    """Repository for managing trips."""

    model_class = Trip

    async def create(
        self,
        distance: float,
        date: str,
        created_at: datetime,
        purpose: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Trip:
        """Create a new trip."""
        trip = Trip(
            distance=distance,
            date=date,
            purpose=purpose,
            notes=notes,
            created_at=created_at,
            updated_at=created_at,
        )
        return await self.add(trip)

    async def get_total_distance(self) -> float:
        """Sum of all trip distances, 0 when there are no trips."""
        result = await self.session.execute(
            select(func.coalesce(func.sum(Trip.distance), 0.0))
        )
        return float(result.scalar() or 0.0)
