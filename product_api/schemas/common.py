"""
Common Schemas

Response bodies shared by several endpoints.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Short human-readable outcome message."""

    message: str


class ProblemDetails(BaseModel):
    """RFC 9457 problem details body used for 500 responses."""

    type: str = "https://tools.ietf.org/html/rfc9110#section-15.6.1"
    title: str
    status: int
    detail: str | None = None
