"""Expense service: validation and persistence of vehicle expenses."""
from core.dto.expenses import CreateExpenseDTO, UpdateExpenseDTO
from core.entities import ExpenseRecord
from database.repositories.expense import ExpenseRepository
from services.base import BaseEntityService


class ExpenseService(BaseEntityService[ExpenseRecord]):
    """CRUD for expenses."""

    resource_name = "expense"
    repository_class = ExpenseRepository
    record_class = ExpenseRecord
    create_dto = CreateExpenseDTO
    update_dto = UpdateExpenseDTO
