"""
Movie Store Data Models

This module defines the Pydantic models for request/response validation.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# ========== Record Models ==========

class Movie(BaseModel):
    """
    A stored movie record.

    Frozen so that the instance handed out by the store cannot be changed
    by a caller. Fields are strict: "1995" is not a year and 1 is not a bool.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Movie ID, also the store key", min_length=1, strict=True)
    name: str = Field(..., description="Title", strict=True)
    year: int = Field(..., description="Release year", ge=0, le=65535, strict=True)
    was_good: bool = Field(..., description="Whether the movie was any good", strict=True)


# ========== Service Models ==========

class ServiceInfo(BaseModel):
    """Response model for the root banner."""
    service: str
    status: str = "running"
    version: str


class HealthResponse(BaseModel):
    """Response model for the health probe."""
    status: str = "ok"
    movies: int = Field(..., description="Number of stored movies", ge=0)


# ========== Error Models ==========

class ErrorResponse(BaseModel):
    """Generic error response model."""
    error: str
    details: Optional[Any] = None
    request_id: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    """Error body for a payload that does not match the Movie shape."""
    error: str = "Validation error"
    details: List[Any]
