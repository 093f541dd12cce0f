"""Refill DTOs for data validation."""
from typing import Any, Optional

from pydantic import Field, field_validator

from core.dto.base import LedgerDTO
from core.validation import (
    iso_date,
    optional_positive_number,
    optional_text,
    positive_number,
    required_date,
)


class CreateRefillDTO(LedgerDTO):
    """DTO for creating a new refill. Efficiency is derived, never accepted."""

    amount_spent: float = Field(..., description="Money paid for the refill")
    distance_traveled: float = Field(..., description="Distance covered on this refill")
    liters: Optional[float] = Field(None, description="Fuel volume")
    date: str = Field(..., description="ISO 8601 date of the refill")
    notes: Optional[str] = Field(None, description="Free text")

    @field_validator("amount_spent", mode="before")
    @classmethod
    def validate_amount_spent(cls, v: Any) -> float:
        return positive_number(v, "Amount", "amountSpent")

    @field_validator("distance_traveled", mode="before")
    @classmethod
    def validate_distance_traveled(cls, v: Any) -> float:
        return positive_number(v, "Distance", "distanceTraveled")

    @field_validator("liters", mode="before")
    @classmethod
    def validate_liters(cls, v: Any) -> Optional[float]:
        return optional_positive_number(v, "Liters", "liters")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        return required_date(v)

    @field_validator("notes", mode="before")
    @classmethod
    def validate_notes(cls, v: Any) -> Optional[str]:
        return optional_text(v, "notes") or None


class UpdateRefillDTO(LedgerDTO):
    """DTO for a partial refill update."""

    amount_spent: Optional[float] = Field(None, description="New amount")
    distance_traveled: Optional[float] = Field(None, description="New distance")
    liters: Optional[float] = Field(None, description="New volume, null clears it")
    date: Optional[str] = Field(None, description="New ISO 8601 date")
    notes: Optional[str] = Field(None, description="New notes, empty string is kept")

    @field_validator("amount_spent", mode="before")
    @classmethod
    def validate_amount_spent(cls, v: Any) -> float:
        return positive_number(v, "Amount", "amountSpent")

    @field_validator("distance_traveled", mode="before")
    @classmethod
    def validate_distance_traveled(cls, v: Any) -> float:
        return positive_number(v, "Distance", "distanceTraveled")

    @field_validator("liters", mode="before")
    @classmethod
    def validate_liters(cls, v: Any) -> Optional[float]:
        return optional_positive_number(v, "Liters", "liters")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        return iso_date(v)

    @field_validator("notes", mode="before")
    @classmethod
    def validate_notes(cls, v: Any) -> Optional[str]:
        return optional_text(v, "notes")
