"""
Custom application exceptions.

These exceptions represent ledger errors that the HTTP layer translates
into status codes. Messages are matched by callers, keep them stable.
"""
from typing import Optional


class LedgerError(Exception):
    """Base exception for all application errors."""

    message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None, **kwargs):
        self.message = message or self.message
        self.details = kwargs
        super().__init__(self.message)


# ============== Validation ==============

class ValidationError(LedgerError):
    """Input failed a precondition."""
    message = "Validation error"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.field = field
        super().__init__(message, field=field)


class RequiredFieldMissingError(ValidationError):
    """A required field was not supplied."""

    def __init__(self, field: str):
        super().__init__(f"Required field missing: {field}", field=field)


class NotPositiveError(ValidationError):
    """A numeric field is not a positive number."""

    def __init__(self, label: str, field: Optional[str] = None):
        super().__init__(f"{label} must be a positive number", field=field)


class InvalidDateError(ValidationError):
    """A date field does not parse as ISO 8601."""
    message = "Invalid date format. Use ISO 8601 format"

    def __init__(self, field: str = "date"):
        super().__init__(self.message, field=field)


class EmptyFieldError(ValidationError):
    """A required text field was updated to a blank value."""

    def __init__(self, label: str, field: Optional[str] = None):
        super().__init__(f"{label} cannot be empty", field=field)


# ============== Resources ==============

class ResourceNotFoundError(LedgerError):
    """Referenced entity does not exist."""
    message = "Resource not found"

    def __init__(self, resource: Optional[str] = None, resource_id: Optional[int] = None):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(resource=resource, resource_id=resource_id)


# ============== Configuration ==============

class ConfigurationError(LedgerError):
    """Required configuration is missing."""
    message = "Service is not configured"


# ============== Authentication ==============

class AuthenticationError(LedgerError):
    """Caller is not authenticated."""
    message = "Unauthorized"
