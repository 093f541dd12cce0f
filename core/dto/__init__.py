"""
Data Transfer Objects (DTOs) for data validation.

This package contains Pydantic models for validating ledger input.
"""

from core.dto.base import LedgerDTO
from core.dto.expenses import (
    CreateExpenseDTO,
    UpdateExpenseDTO,
)
from core.dto.refills import (
    CreateRefillDTO,
    UpdateRefillDTO,
)
from core.dto.trips import (
    CreateTripDTO,
    UpdateTripDTO,
)

__all__ = [
    'LedgerDTO',
    'CreateExpenseDTO',
    'UpdateExpenseDTO',
    'CreateRefillDTO',
    'UpdateRefillDTO',
    'CreateTripDTO',
    'UpdateTripDTO',
]
