"""
Common Schemas

Base config for response models plus the payloads every route can return:
the error envelope and the health check body.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Response base: builds from ORM rows and service dataclasses alike."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable error code, e.g. NOT_FOUND")
    message: str = Field(description="Human-readable explanation")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Field names or other context for the failure",
    )


class ErrorResponse(BaseModel):
    """
    Body of every non-2xx response.

    Example:
        {"error": {"code": "AUTHORIZATION_ERROR",
                   "message": "Only the author can modify this book",
                   "details": {}}}
    """

    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "booknotes"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
