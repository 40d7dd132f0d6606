"""
Shared FastAPI dependencies for admin endpoints.

This module provides commonly used dependency injection functions:
- get_auth: The auth strategy loaded at boot
- get_current_admin: The authenticated admin
- get_wildcard / get_url_generator / get_request_snapshot: Routing helpers
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from decoy.api.schemas.auth import AdminIdentity
from decoy.api.schemas.common import DecoySettings
from decoy.controllers.registry import ControllerRegistry
from decoy.core.auth import AuthInterface
from decoy.core.exceptions import HTTPUnauthorizedException
from decoy.routing.request import RequestSnapshot
from decoy.routing.url_generator import UrlGenerator
from decoy.routing.wildcard import Wildcard

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> DecoySettings:
    return request.app.state.decoy


def get_auth(request: Request) -> AuthInterface:
    return request.app.state.auth


def get_controllers(request: Request) -> ControllerRegistry:
    return request.app.state.controllers


async def get_current_admin(
    request: Request,
    auth: Annotated[AuthInterface, Depends(get_auth)],
) -> AdminIdentity:
    """
    Get the admin making the request.

    Raises:
        HTTPException: If the auth strategy doesn't recognize the request.
    """
    admin = await auth.authenticate(request)
    if admin is None:
        raise HTTPUnauthorizedException("Could not validate credentials")
    return admin


CurrentAdmin = Annotated[AdminIdentity, Depends(get_current_admin)]


async def get_request_snapshot(request: Request) -> RequestSnapshot:
    return await RequestSnapshot.from_request(request)


def get_wildcard(
    request: Request,
    settings: Annotated[DecoySettings, Depends(get_settings)],
    controllers: Annotated[ControllerRegistry, Depends(get_controllers)],
) -> Wildcard:
    return Wildcard(settings.dir, request.method, request.url.path, registry=controllers)


def get_url_generator(
    settings: Annotated[DecoySettings, Depends(get_settings)],
) -> UrlGenerator:
    return UrlGenerator(settings.dir)
