"""
NoteShelf Backend: Shared Response Schemas
==========================================

What:  Error envelope and health payload shared across routers.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Largest value an INTEGER (int4) id column can hold
MAX_RECORD_ID = 2**31 - 1


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '42' was not found",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class MessageResponse(BaseModel):
    message: str
