"""
Base schemas and the common response envelope.
"""
from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict


# Generic payload type for enveloped responses
T = TypeVar("T")


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class Envelope(BaseSchema, Generic[T]):
    """
    Every response body: ``{"err": false, "data": <payload>}`` on success,
    ``{"err": true, "data": "<error message>"}`` on failure.
    """

    err: bool = False
    data: T


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str


def ok(data: T) -> Envelope[T]:
    """Wrap a successful payload."""
    return Envelope(err=False, data=data)


def error_body(message: str) -> dict:
    """JSON body for a failed request."""
    return {"err": True, "data": message}
