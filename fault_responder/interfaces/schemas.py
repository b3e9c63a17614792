"""
Pydantic schemas for the service's own endpoints.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
    responder: str
