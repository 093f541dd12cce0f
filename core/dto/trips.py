"""Trip DTOs for data validation."""
from typing import Any, Optional

from pydantic import Field, field_validator

from core.dto.base import LedgerDTO
from core.validation import iso_date, optional_text, positive_number, required_date


class CreateTripDTO(LedgerDTO):
    """DTO for creating a new trip."""

    distance: float = Field(..., description="Distance driven")
    date: str = Field(..., description="ISO 8601 date of the trip")
    purpose: Optional[str] = Field(None, description="Why the trip was made")
    notes: Optional[str] = Field(None, description="Free text")

    @field_validator("distance", mode="before")
    @classmethod
    def validate_distance(cls, v: Any) -> float:
        return positive_number(v, "Distance", "distance")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        return required_date(v)

    @field_validator("purpose", "notes", mode="before")
    @classmethod
    def validate_text(cls, v: Any, info) -> Optional[str]:
        return optional_text(v, info.field_name) or None


class UpdateTripDTO(LedgerDTO):
    """DTO for a partial trip update."""

    distance: Optional[float] = Field(None, description="New distance")
    date: Optional[str] = Field(None, description="New ISO 8601 date")
    purpose: Optional[str] = Field(None, description="New purpose, empty string is kept")
    notes: Optional[str] = Field(None, description="New notes, empty string is kept")

    @field_validator("distance", mode="before")
    @classmethod
    def validate_distance(cls, v: Any) -> float:
        return positive_number(v, "Distance", "distance")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        return iso_date(v)

    @field_validator("purpose", "notes", mode="before")
    @classmethod
    def validate_text(cls, v: Any, info) -> Optional[str]:
        return optional_text(v, info.field_name)
