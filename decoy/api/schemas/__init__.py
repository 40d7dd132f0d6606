"""
Pydantic schemas for API request/response validation.
"""

from decoy.api.schemas.ancestry import AncestryResponse, AncestrySummary
from decoy.api.schemas.auth import AdminIdentity, AdminLogin, Token, TokenPayload
from decoy.api.schemas.common import BaseSchema, DecoySettings, HealthResponse

__all__ = [
    "AncestryResponse",
    "AncestrySummary",
    "AdminIdentity",
    "AdminLogin",
    "Token",
    "TokenPayload",
    "BaseSchema",
    "DecoySettings",
    "HealthResponse",
]
