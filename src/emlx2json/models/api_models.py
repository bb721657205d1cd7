"""
API response models for FastAPI endpoints.
"""

from typing import Optional
from pydantic import BaseModel, Field

from .message import Message, MessageSummary


class ParseMessageResponse(BaseModel):
    """Response model for the message parse endpoint."""

    success: bool = Field(description="Whether parsing succeeded")
    message: Optional[Message] = Field(None, description="Parsed message")
    summary: Optional[MessageSummary] = Field(None, description="Summary, when requested")
    error: Optional[str] = Field(None, description="Error message if failed")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status", examples=["healthy"])
    version: str = Field(description="API version", examples=["1.0.0"])
    parser_version: str = Field(description="Parser version", examples=["emlx-parser-1.0.0"])
    uptime_seconds: float = Field(description="Service uptime")


class VersionResponse(BaseModel):
    """Version information response."""

    api_version: str = Field(description="API version")
    parser_version: str = Field(description="Parser version")
