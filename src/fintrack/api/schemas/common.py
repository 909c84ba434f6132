"""Shared schema configuration and response envelopes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model exchanging camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(ApiModel):
    """Plain acknowledgement."""

    success: bool = True
    message: str


class ErrorResponse(ApiModel):
    """Body returned for every failed request."""

    success: bool = False
    error: str
    message: str
