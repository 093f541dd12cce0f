"""Tests for field validation rules and DTO parsing."""
import math

import pytest

from core.dto import CreateExpenseDTO, CreateRefillDTO, UpdateRefillDTO
from core.exceptions import (
    EmptyFieldError,
    InvalidDateError,
    NotPositiveError,
    RequiredFieldMissingError,
    ValidationError,
)
from core.validation import iso_date, non_empty_text, positive_number


@pytest.mark.parametrize("value", [
    0, -1, -0.5, True, "10", None, math.nan, math.inf, 10**400, -10**400,
])
def test_positive_number_rejects(value):
    with pytest.raises(NotPositiveError) as exc:
        positive_number(value, "Amount", "amount")
    assert exc.value.message == "Amount must be a positive number"
    assert exc.value.details["field"] == "amount"


def test_positive_number_accepts_ints_and_floats():
    assert positive_number(3, "Amount") == 3.0
    assert positive_number(0.01, "Amount") == 0.01


@pytest.mark.parametrize("value", ["2024-01-15", "2024-01-15T10:30:00Z", "2024-01-15T10:30:00+02:00"])
def test_iso_date_accepts(value):
    assert iso_date(value) == value


@pytest.mark.parametrize("value", [
    "", "yesterday", "2024-13-01", 20240115,
    "20240115", "2024-W03", "2024-W03-1", "2024-015", "2024-01-15 10:30",
])
def test_iso_date_rejects(value):
    with pytest.raises(InvalidDateError):
        iso_date(value)


def test_non_empty_text_rejects_blank():
    with pytest.raises(EmptyFieldError) as exc:
        non_empty_text("   ", "type")
    assert exc.value.message == "Type cannot be empty"


def test_create_expense_missing_type():
    with pytest.raises(RequiredFieldMissingError) as exc:
        CreateExpenseDTO.parse({"amount": 10, "date": "2024-01-01"})
    assert "Required field missing" in exc.value.message


def test_create_expense_ignores_server_fields():
    dto = CreateExpenseDTO.parse({
        "type": "Tolls", "amount": 3, "date": "2024-01-01",
        "id": 99, "createdAt": "2000-01-01T00:00:00",
    })
    assert dto.type == "Tolls"
    assert not hasattr(dto, "id")


def test_create_refill_accepts_camel_and_snake_case():
    camel = CreateRefillDTO.parse({"amountSpent": 40, "distanceTraveled": 8, "date": "2024-01-01"})
    snake = CreateRefillDTO.parse({"amount_spent": 40, "distance_traveled": 8, "date": "2024-01-01"})
    assert camel.amount_spent == snake.amount_spent == 40.0
    assert camel.distance_traveled == snake.distance_traveled == 8.0


def test_create_refill_blank_notes_become_none():
    dto = CreateRefillDTO.parse({"amountSpent": 40, "distanceTraveled": 8, "date": "2024-01-01", "notes": ""})
    assert dto.notes is None


def test_update_refill_tracks_supplied_fields():
    dto = UpdateRefillDTO.parse({"liters": None, "notes": ""})
    assert dto.changes() == {"liters": None, "notes": ""}


def test_update_refill_rejects_zero_distance():
    with pytest.raises(NotPositiveError) as exc:
        UpdateRefillDTO.parse({"distanceTraveled": 0})
    assert exc.value.message == "Distance must be a positive number"


def test_parse_rejects_non_object():
    with pytest.raises(ValidationError):
        CreateExpenseDTO.parse(["not", "an", "object"])
