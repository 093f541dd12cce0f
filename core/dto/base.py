"""Shared behaviour for ledger DTOs."""
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from core.exceptions import RequiredFieldMissingError, ValidationError


class LedgerDTO(BaseModel):
    """
    Base DTO for ledger input.

    Accepts camelCase wire keys as well as snake_case field names.
    Unknown keys (id, efficiency, createdAt, ...) are dropped, so callers
    can never set server-owned fields.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def parse(cls, data: Mapping[str, Any]):
        """
        Validate raw input and raise ledger errors instead of pydantic ones.

        Field validators raise core.exceptions directly; whatever pydantic
        reports itself (missing keys, wrong types) is converted here.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError("Request body must be a JSON object")
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            if error["type"] == "missing" and field:
                raise RequiredFieldMissingError(field) from None
            raise ValidationError(error["msg"], field=field) from None

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly supplied by the caller, keyed by field name."""
        return {name: getattr(self, name) for name in self.model_fields_set}
