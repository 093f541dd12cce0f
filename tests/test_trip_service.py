"""Tests for TripService."""
import pytest

from core.exceptions import InvalidDateError, NotPositiveError, ResourceNotFoundError
from services.trips import TripService


class TestTripService:

    @pytest.mark.asyncio
    async def test_create_trip(self, db_session):
        service = TripService(db_session)

        trip = await service.create(
            {"distance": 45.5, "date": "2024-01-15", "purpose": "Work", "notes": ""}
        )

        assert trip.id >= 1
        assert trip.distance == 45.5
        assert trip.purpose == "Work"
        assert trip.notes is None
        assert trip.to_json()["distance"] == 45.5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("distance", [0, -12, "far"])
    async def test_distance_must_be_positive(self, db_session, distance):
        service = TripService(db_session)

        with pytest.raises(NotPositiveError, match="Distance must be a positive number"):
            await service.create({"distance": distance, "date": "2024-01-15"})

        assert await service.count() == 0

    @pytest.mark.asyncio
    async def test_timestamp_dates_accepted(self, db_session):
        service = TripService(db_session)

        trip = await service.create({"distance": 3, "date": "2024-01-15T10:00:00Z"})

        assert trip.date == "2024-01-15T10:00:00Z"

    @pytest.mark.asyncio
    async def test_list_sorted_regardless_of_insertion(self, db_session):
        service = TripService(db_session)
        for day in ("2024-02-10", "2023-12-31", "2024-01-20"):
            await service.create({"distance": 1, "date": day})

        trips = await service.list()

        assert [t.date for t in trips] == ["2023-12-31", "2024-01-20", "2024-02-10"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["20240101", "2024-W01", "2024-001"])
    async def test_compact_and_week_dates_rejected(self, db_session, value):
        service = TripService(db_session)
        await service.create({"distance": 2, "date": "2024-02-01"})

        with pytest.raises(InvalidDateError):
            await service.create({"distance": 1, "date": value})

        trips = await service.list()
        assert [t.date for t in trips] == ["2024-02-01"]

    @pytest.mark.asyncio
    async def test_update_keeps_created_at(self, db_session):
        service = TripService(db_session)
        created = await service.create({"distance": 10, "date": "2024-01-01"})

        updated = await service.update(created.id, {"purpose": "", "distance": 12})

        assert updated.distance == 12
        assert updated.purpose == ""
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.created_at

    @pytest.mark.asyncio
    async def test_update_invalid_date(self, db_session):
        service = TripService(db_session)
        created = await service.create({"distance": 10, "date": "2024-01-01"})

        with pytest.raises(InvalidDateError):
            await service.update(created.id, {"date": ""})

    @pytest.mark.asyncio
    async def test_update_missing(self, db_session):
        with pytest.raises(ResourceNotFoundError):
            await TripService(db_session).update(3, {})

    @pytest.mark.asyncio
    async def test_delete_missing(self, db_session):
        assert await TripService(db_session).delete(3) is False

    @pytest.mark.asyncio
    async def test_total_distance(self, db_session):
        service = TripService(db_session)
        assert await service.total_distance() == 0

        await service.create({"distance": 10, "date": "2024-01-01"})
        await service.create({"distance": 2.5, "date": "2024-01-02"})

        assert await service.total_distance() == 12.5
