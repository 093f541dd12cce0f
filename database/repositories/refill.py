"""Repository for Refill model operations."""
from datetime import datetime
from typing import Optional

from database.models.refill import Refill
from database.repositories.base import BaseRepository


class RefillRepository(BaseRepository[Refill]):
    """Repository for managing refills."""

    model_class = Refill

    async def create(
        self,
        amount_spent: float,
        distance_traveled: float,
        efficiency: float,
        date: str,
        created_at: datetime,
        liters: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> Refill:
        """Create a new refill. Efficiency must already be computed."""
        refill = Refill(
            amount_spent=amount_spent,
            distance_traveled=distance_traveled,
            liters=liters,
            efficiency=efficiency,
            date=date,
            notes=notes,
            created_at=created_at,
            updated_at=created_at,
        )
        return await self.add(refill)
