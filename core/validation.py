"""
Field-level validation rules shared by all ledger DTOs.

Each helper either returns the normalized value or raises one of the
ValidationError subclasses from core.exceptions.
"""
import math
import re
from datetime import date, datetime
from typing import Any, Optional

from core.exceptions import (
    EmptyFieldError,
    InvalidDateError,
    NotPositiveError,
    RequiredFieldMissingError,
    ValidationError,
)

# Extended ISO 8601 only: stored dates are ordered as text, which breaks
# for the basic (20240101) and week (2024-W03) forms.
_ISO_DATE_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(T\d{2}:\d{2}(:\d{2}(\.\d+)?)?([Zz]|[+-]\d{2}:\d{2})?)?$"
)


def positive_number(value: Any, label: str, field: Optional[str] = None) -> float:
    """
    Require a finite, strictly positive real number.

    Booleans and numeric strings are rejected: the wire contract is a JSON number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NotPositiveError(label, field)
    try:
        number = float(value)
    except OverflowError:
        raise NotPositiveError(label, field) from None
    if not math.isfinite(number) or number <= 0:
        raise NotPositiveError(label, field)
    return number


def optional_positive_number(value: Any, label: str, field: Optional[str] = None) -> Optional[float]:
    """Like positive_number, but None passes through."""
    if value is None:
        return None
    return positive_number(value, label, field)


def parse_iso_date(value: Any) -> datetime:
    """Parse an extended ISO 8601 date or timestamp string."""
    text = value.strip()
    if not _ISO_DATE_RE.match(text):
        raise ValueError(f"Not an extended ISO 8601 date: {value!r}")
    # fromisoformat only learned the "Z" suffix in 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def iso_date(value: Any, field: str = "date") -> str:
    """
    Require a value that parses as an ISO 8601 calendar date or timestamp.

    The caller's string is kept as-is (trimmed) so it round-trips unchanged;
    date/datetime objects are serialized with isoformat().
    """
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if not isinstance(value, str):
        raise InvalidDateError(field)
    try:
        parse_iso_date(value)
    except ValueError:
        raise InvalidDateError(field) from None
    return value.strip()


def required_date(value: Any, field: str = "date") -> str:
    """Date that must be present on creation."""
    if value is None or value == "":
        raise RequiredFieldMissingError(field)
    return iso_date(value, field)


def required_text(value: Any, field: str) -> str:
    """Text that must be present and non-blank on creation."""
    if value is None:
        raise RequiredFieldMissingError(field)
    if not isinstance(value, str):
        raise ValidationError(f"{field.capitalize()} must be a string", field=field)
    if not value.strip():
        raise RequiredFieldMissingError(field)
    return value


def non_empty_text(value: Any, field: str) -> str:
    """Text that, once supplied in an update, may not be blank."""
    if not isinstance(value, str) or not value.strip():
        raise EmptyFieldError(field.capitalize(), field)
    return value


def optional_text(value: Any, field: str) -> Optional[str]:
    """Free text or None."""
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"{field.capitalize()} must be a string", field=field)
