"""
Pydantic schemas shared by every router.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response body.

    Attributes:
        error: Stable machine-readable code such as ``rate_limited``.
    """

    error: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    locales: list[str]
    datastore_configured: bool
    market_key_configured: bool
