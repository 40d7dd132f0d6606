"""
API endpoints module.

This module exports all API routers.
"""

from decoy.api.endpoints.admin import router as admin_router
from decoy.api.endpoints.auth import router as auth_router

__all__ = ["admin_router", "auth_router"]
