"""Shared Pydantic schema pieces."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exchanged as camelCase JSON.

    Attributes stay snake_case in Python; unknown fields in request
    bodies are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(description="Human readable confirmation")


class ErrorResponse(BaseModel):
    """Error payload returned for missing resources."""

    error: str = Field(description="Error message, e.g. 'Artist not found'")
