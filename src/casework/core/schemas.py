"""Core Pydantic schemas for entities and error responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EntityIn(BaseModel):
    """Base input schema for entities; ids are always assigned by the store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EntityOut(BaseModel):
    """Base output schema for entities with a store-assigned integer id."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int = Field(description="Store-assigned identifier")


class ErrorResponse(BaseModel):
    """Error body returned for client and not-found errors."""

    error: str = Field(description="One-line error message")
