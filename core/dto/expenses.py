"""Expense DTOs for data validation."""
from typing import Any, Optional

from pydantic import Field, field_validator

from core.dto.base import LedgerDTO
from core.validation import (
    iso_date,
    non_empty_text,
    optional_text,
    positive_number,
    required_date,
    required_text,
)


class CreateExpenseDTO(LedgerDTO):
    """DTO for creating a new expense."""

    type: str = Field(..., description="Expense category, e.g. insurance or parking")
    amount: float = Field(..., description="Amount spent")
    date: str = Field(..., description="ISO 8601 date of the expense")
    description: Optional[str] = Field(None, description="Free text")

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> str:
        return required_text(v, "type")

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> float:
        return positive_number(v, "Amount", "amount")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        return required_date(v)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v: Any) -> Optional[str]:
        """Empty description on creation means "not provided"."""
        return optional_text(v, "description") or None


class UpdateExpenseDTO(LedgerDTO):
    """DTO for a partial expense update. Only supplied fields are applied."""

    type: Optional[str] = Field(None, description="New category")
    amount: Optional[float] = Field(None, description="New amount")
    date: Optional[str] = Field(None, description="New ISO 8601 date")
    description: Optional[str] = Field(None, description="New description, empty string is kept")

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> str:
        return non_empty_text(v, "type")

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> float:
        return positive_number(v, "Amount", "amount")

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        return iso_date(v)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v: Any) -> Optional[str]:
        return optional_text(v, "description")
