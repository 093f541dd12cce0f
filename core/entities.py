"""
Read-side domain objects.

Entity services map ORM rows into these immutable models; the HTTP layer
serializes them with to_json(), which produces the camelCase wire shape.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LedgerRecord(BaseModel):
    """Base for all records returned by the services."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json(self) -> Dict[str, Any]:
        """Wire representation; optional fields are omitted when absent."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ExpenseRecord(LedgerRecord):
    id: int
    type: str
    amount: float
    date: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class RefillRecord(LedgerRecord):
    id: int
    amount_spent: float
    distance_traveled: float
    liters: Optional[float] = None
    date: str
    notes: Optional[str] = None
    efficiency: float
    created_at: datetime
    updated_at: datetime


class TripRecord(LedgerRecord):
    id: int
    distance: float
    date: str
    purpose: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MileagePoint(LedgerRecord):
    """One point of the mileage series."""

    date: str
    cumulative_distance: float
