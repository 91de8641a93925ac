"""
Booklist Backend - Shared Response Schemas
===========================================

What:  Error and health response models used across all routes.
Why:   Clients parse errors by a single structure; the OpenAPI docs show it
       on every route's failure responses.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response for 400, 404 and 500 responses.

    Example:
        {
            "error": "not_found",
            "message": "Book Not Found",
            "request_id": "1a2b3c4d"
        }

    422 and 409 responses instead carry the serialized record with an
    `errors` mapping (see app/serializers.py).
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
