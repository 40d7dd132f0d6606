"""
Authentication API endpoints.

This module provides:
- Admin login endpoint
- Admin logout endpoint
- Current admin endpoint
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from decoy.api.dependencies import CurrentAdmin, get_auth
from decoy.api.schemas.auth import AdminIdentity, AdminLogin, Token
from decoy.core.auth import AuthInterface
from decoy.core.exceptions import ErrorResponse, HTTPUnauthorizedException

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post(
    "/login",
    response_model=Token,
    responses={
        200: {"model": Token, "description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
    summary="Admin login",
    description="Exchange admin credentials for an access token.",
)
async def login(
    credentials: AdminLogin,
    auth: Annotated[AuthInterface, Depends(get_auth)],
) -> Token:
    """
    Log an admin in.
    """
    token = await auth.login(credentials.email, credentials.password)
    if token is None:
        raise HTTPUnauthorizedException("Invalid email or password")
    return token


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Admin logout",
)
async def logout(admin: CurrentAdmin) -> None:
    """
    Tokens are stateless, so logging out is up to the client discarding
    its token. The endpoint exists so clients have a uniform URL to call.
    """
    logger.info(f"{admin.email} logged out")


@router.get(
    "/me",
    response_model=AdminIdentity,
    summary="Current admin",
)
async def me(admin: CurrentAdmin) -> AdminIdentity:
    return admin
