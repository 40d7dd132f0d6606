"""
Base Pydantic configurations and common schemas.

This module provides:
- Custom base model with shared configurations
- Health check response
- Admin settings response
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """
    Base schema with shared configurations.

    Attributes:
        model_config: Pydantic model configuration.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DecoySettings(BaseSchema):
    """
    Admin-wide constants made available to every request.

    Attributes:
        dir: URL directory of the admin.
        upload_delete: Prefix of fields that delete an existing upload.
        upload_old: Prefix of fields that carry the previous upload.
        upload_replace: Prefix of fields that replace an existing upload.
        format_date: strftime format for dates.
        format_datetime: strftime format for datetimes.
        format_time: strftime format for times.
    """

    dir: str = Field(..., description="Admin URL directory")
    upload_delete: str
    upload_old: str
    upload_replace: str
    format_date: str
    format_datetime: str
    format_time: str
