"""Repository for Expense model operations."""
from datetime import datetime
from typing import Optional

from database.models.expense import Expense
from database.repositories.base import BaseRepository


class ExpenseRepository(BaseRepository[Expense]):
    """Repository for managing expenses."""

    model_class = Expense

    async def create(
        self,
        type: str,
        amount: float,
        date: str,
        created_at: datetime,
        description: Optional[str] = None,
    ) -> Expense:
        """Create a new expense."""
        expense = Expense(
            type=type,
            amount=amount,
            date=date,
            description=description,
            created_at=created_at,
            updated_at=created_at,
        )
        return await self.add(expense)
