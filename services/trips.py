"""Trip service: distance driven outside of refills."""
from core.dto.trips import CreateTripDTO, UpdateTripDTO
from core.entities import TripRecord
from database.repositories.trip import TripRepository
from services.base import BaseEntityService


class TripService(BaseEntityService[TripRecord]):
    """CRUD for trips."""

    resource_name = "trip"
    repository_class = TripRepository
    record_class = TripRecord
    create_dto = CreateTripDTO
    update_dto = UpdateTripDTO

    async def total_distance(self) -> float:
        """Total distance across all trips."""
        return await self.repository.get_total_distance()
