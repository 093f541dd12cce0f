"""Unit tests for the ledger repositories."""
import pytest
from datetime import datetime

from database.repositories.expense import ExpenseRepository
from database.repositories.refill import RefillRepository
from database.repositories.trip import TripRepository


@pytest.mark.asyncio
async def test_create_expense(db_session):
    """Test creating a new expense."""
    repo = ExpenseRepository(db_session)
    now = datetime(2024, 1, 1, 12, 0, 0)

    expense = await repo.create(
        type="Insurance",
        amount=420.0,
        date="2024-01-01",
        description="Yearly policy",
        created_at=now,
    )

    assert expense.id is not None
    assert expense.type == "Insurance"
    assert expense.amount == 420.0
    assert expense.description == "Yearly policy"
    assert expense.created_at == expense.updated_at == now


@pytest.mark.asyncio
async def test_get_by_id(db_session):
    """Test retrieving expense by ID."""
    repo = ExpenseRepository(db_session)

    created = await repo.create(
        type="Parking",
        amount=12.5,
        date="2024-02-01",
        created_at=datetime.now(),
    )

    retrieved = await repo.get_by_id(created.id)

    assert retrieved is not None
    assert retrieved.id == created.id
    assert retrieved.type == "Parking"


@pytest.mark.asyncio
async def test_get_by_id_not_found(db_session):
    """Test that non-existent ID returns None."""
    repo = ExpenseRepository(db_session)

    assert await repo.get_by_id(999) is None


@pytest.mark.asyncio
async def test_get_all_ordered_by_date(db_session):
    """Rows come back earliest first, whatever the insertion order."""
    repo = ExpenseRepository(db_session)
    now = datetime.now()

    for day in ("2024-03-01", "2024-01-01", "2024-02-01"):
        await repo.create(type="Wash", amount=10, date=day, created_at=now)

    expenses = await repo.get_all()

    assert [e.date for e in expenses] == ["2024-01-01", "2024-02-01", "2024-03-01"]


@pytest.mark.asyncio
async def test_same_date_keeps_insertion_order(db_session):
    repo = ExpenseRepository(db_session)
    now = datetime.now()

    first = await repo.create(type="A", amount=1, date="2024-01-01", created_at=now)
    second = await repo.create(type="B", amount=2, date="2024-01-01", created_at=now)

    expenses = await repo.get_all()

    assert [e.id for e in expenses] == [first.id, second.id]


@pytest.mark.asyncio
async def test_update_expense(db_session):
    """Test updating expense."""
    repo = ExpenseRepository(db_session)

    expense = await repo.create(
        type="Maintenance",
        amount=100,
        date="2024-01-01",
        created_at=datetime.now(),
    )

    expense.amount = 150
    expense.description = "Updated description"

    updated = await repo.update(expense)

    assert updated.amount == 150
    assert updated.description == "Updated description"


@pytest.mark.asyncio
async def test_delete_expense(db_session):
    """Test deleting expense."""
    repo = ExpenseRepository(db_session)

    expense = await repo.create(
        type="Tolls",
        amount=8,
        date="2024-01-01",
        created_at=datetime.now(),
    )

    expense_id = expense.id

    assert await repo.delete(expense_id) is True

    # Try to retrieve deleted expense
    deleted = await repo.get_by_id(expense_id)
    assert deleted is None


@pytest.mark.asyncio
async def test_delete_missing_returns_false(db_session):
    repo = ExpenseRepository(db_session)
    await repo.create(type="Tolls", amount=8, date="2024-01-01", created_at=datetime.now())

    assert await repo.delete(12345) is False
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_refill_repository_stores_efficiency(db_session):
    repo = RefillRepository(db_session)

    refill = await repo.create(
        amount_spent=60.0,
        distance_traveled=400.0,
        efficiency=0.15,
        liters=40.0,
        date="2024-01-05",
        created_at=datetime.now(),
    )

    stored = await repo.get_by_id(refill.id)
    assert stored.efficiency == 0.15
    assert stored.liters == 40.0


@pytest.mark.asyncio
async def test_trip_total_distance(db_session):
    repo = TripRepository(db_session)

    assert await repo.get_total_distance() == 0

    await repo.create(distance=12.5, date="2024-01-01", created_at=datetime.now())
    await repo.create(distance=30.0, date="2024-01-02", created_at=datetime.now())

    assert await repo.get_total_distance() == 42.5
