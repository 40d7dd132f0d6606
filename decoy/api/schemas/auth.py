"""
Authentication schemas for admin login and tokens.
"""

from typing import Optional
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from decoy.api.schemas.common import BaseSchema


class AdminLogin(BaseModel):
    """Admin login request schema."""

    email: EmailStr = Field(..., description="Admin's email address")
    password: str = Field(..., min_length=1, description="Admin's password")


class Token(BaseModel):
    """JWT token response schema."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration in seconds")


class TokenPayload(BaseModel):
    """JWT token payload schema."""

    sub: str = Field(..., description="Admin ID")
    email: Optional[str] = None
    exp: Optional[datetime] = None
    iat: Optional[datetime] = None
    type: str = Field(default="access", description="Token type")


class AdminIdentity(BaseSchema):
    """The authenticated admin, as seen by controllers and views."""

    id: str
    email: str
    name: Optional[str] = None
    is_developer: bool = False
