"""Shared response envelopes."""

from pydantic import BaseModel

from .. import __version__


class SuccessResponse(BaseModel):
    """Body of a mutation with nothing else to return."""
    success: bool = True


class ErrorResponse(BaseModel):
    """Schema for error response."""
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    """Schema for health check response."""
    status: str = "ok"
    version: str = __version__
