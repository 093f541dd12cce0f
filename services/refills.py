"""Refill service: fuel purchases and their cost efficiency."""
import logging
from typing import Any, Dict

from core.dto.refills import CreateRefillDTO, UpdateRefillDTO
from core.entities import RefillRecord
from core.exceptions import NotPositiveError
from database.models.refill import Refill
from database.repositories.refill import RefillRepository
from services.base import BaseEntityService

logger = logging.getLogger(__name__)


def calculate_efficiency(amount_spent: float, distance: float) -> float:
    """
    Cost per unit of distance.

    Raises:
        NotPositiveError: If distance is zero or negative
    """
    if distance <= 0:
        raise NotPositiveError("Distance", "distanceTraveled")
    return amount_spent / distance


class RefillService(BaseEntityService[RefillRecord]):
    """
    CRUD for refills.

    Efficiency is derived on every create and update from the effective
    amount_spent and distance_traveled; callers cannot set it.
    """

    resource_name = "refill"
    repository_class = RefillRepository
    record_class = RefillRecord
    create_dto = CreateRefillDTO
    update_dto = UpdateRefillDTO

    def _creation_fields(self, dto: CreateRefillDTO) -> Dict[str, Any]:
        fields = dto.model_dump()
        fields["efficiency"] = calculate_efficiency(
            dto.amount_spent, dto.distance_traveled
        )
        return fields

    def _update_fields(self, entity: Refill, dto: UpdateRefillDTO) -> Dict[str, Any]:
        changes = dto.changes()
        amount_spent = changes.get("amount_spent", entity.amount_spent)
        distance = changes.get("distance_traveled", entity.distance_traveled)
        changes["efficiency"] = calculate_efficiency(amount_spent, distance)
        logger.debug(
            f"Refill #{entity.id} efficiency: {entity.efficiency} -> {changes['efficiency']}"
        )
        return changes
