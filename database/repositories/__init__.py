"""Database repositories package."""
from database.repositories.base import BaseRepository
from database.repositories.expense import ExpenseRepository
from database.repositories.refill import RefillRepository
from database.repositories.trip import TripRepository

__all__ = [
    "BaseRepository",
    "ExpenseRepository",
    "RefillRepository",
    "TripRepository",
]
