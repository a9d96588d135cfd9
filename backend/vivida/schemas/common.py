"""Shared base classes for request/response schemas."""
from typing import Annotated, Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# `order` columns are 32-bit INTEGER on PostgreSQL
DisplayOrder = Annotated[int, Field(ge=-2**31, le=2**31 - 1)]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire. Accepts either on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_null(value: Any) -> Any:
    """Partial updates may omit a required column but never set it to null."""
    if value is None:
        raise ValueError("field may not be null")
    return value
