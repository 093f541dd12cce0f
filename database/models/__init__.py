"""Database models package."""
from database.models.expense import Expense
from database.models.refill import Refill
from database.models.trip import Trip

__all__ = [
    "Expense",
    "Refill",
    "Trip",
]
