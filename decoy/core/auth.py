"""
Authentication strategies for the admin.

The admin doesn't care how admins are authenticated, only that the class
named by DECOY_AUTH_CLASS implements AuthInterface. The strategy is loaded
once at boot and stored on the application state, where request
dependencies pick it up.

This module provides:
- AuthInterface, the contract every strategy implements
- DefaultAuth, JWT bearer tokens checked against the Admin model
- load_auth_strategy, which imports and validates the configured class
"""

import importlib
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, Type
from uuid import UUID

from jose import JWTError
from pydantic import ValidationError
from sqlalchemy import select
from starlette.requests import Request

from decoy.api.schemas.auth import AdminIdentity, Token
from decoy.core import config
from decoy.core.exceptions import AuthConfigurationError
from decoy.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    decode_token,
    verify_password,
    verify_token_type,
)
from decoy.db.connection import get_db_context
from decoy.db.models.admin import Admin

logger = logging.getLogger(__name__)


class AuthInterface(ABC):
    """Contract for admin authentication strategies."""

    @abstractmethod
    async def login(self, email: str, password: str) -> Optional[Token]:
        """Exchange credentials for a token, or None if they are invalid."""

    @abstractmethod
    async def authenticate(self, request: Request) -> Optional[AdminIdentity]:
        """Get the admin making the request, or None if not logged in."""

    def can(self, admin: AdminIdentity, action: str, controller: type) -> bool:
        """Check whether an admin may run an action on a controller."""
        return True

    def user_name(self, admin: AdminIdentity) -> str:
        return admin.name or admin.email

    def logout_url(self) -> str:
        return f"/{config.DECOY_DIR}/logout"

    def denied_route(self) -> str:
        """Where to send admins that aren't logged in."""
        return f"/{config.DECOY_DIR}/login"


class DefaultAuth(AuthInterface):
    """
    Authenticate admins from the admins table with JWT bearer tokens.
    """

    async def login(self, email: str, password: str) -> Optional[Token]:
        async with get_db_context() as session:
            result = await session.execute(select(Admin).where(Admin.email == email))
            admin = result.scalar_one_or_none()

            if not admin or not admin.is_active:
                logger.info(f"Login refused for {email}")
                return None
            if not verify_password(password, admin.password_hash):
                logger.info(f"Invalid password for {email}")
                return None

            admin.last_login_at = datetime.now(timezone.utc)

        return Token(
            access_token=create_access_token(str(admin.id), email=admin.email),
            expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )

    async def authenticate(self, request: Request) -> Optional[AdminIdentity]:
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            return None

        try:
            payload = decode_token(token)
        except (JWTError, ValidationError) as e:
            logger.error(f"Authentication error: {str(e)}")
            return None

        if not verify_token_type(payload, "access"):
            return None

        admin_id = _parse_uuid(payload.sub)
        if admin_id is None:
            return None

        async with get_db_context() as session:
            admin = await session.get(Admin, admin_id)

        if not admin or not admin.is_active:
            return None

        return AdminIdentity(
            id=str(admin.id),
            email=admin.email,
            name=admin.full_name,
            is_developer=admin.is_developer,
        )


def _parse_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(value)
    except ValueError:
        return None


def load_auth_class(dotted_path: str) -> Type[AuthInterface]:
    """
    Import the auth class named by a dotted path.

    Args:
        dotted_path: ex: "decoy.core.auth.DefaultAuth".

    Returns:
        The class.

    Raises:
        AuthConfigurationError: If the class can't be imported or doesn't
            implement AuthInterface.
    """
    module_name, _, class_name = dotted_path.rpartition(".")
    try:
        auth_class = getattr(importlib.import_module(module_name), class_name)
    except (ImportError, AttributeError, ValueError):
        raise AuthConfigurationError("Auth class does not exist", dotted_path)

    if not isinstance(auth_class, type) or not issubclass(auth_class, AuthInterface):
        raise AuthConfigurationError("Auth class does not implement AuthInterface", dotted_path)
    return auth_class


def load_auth_strategy(dotted_path: Optional[str] = None) -> AuthInterface:
    """Instantiate the configured auth strategy."""
    dotted_path = dotted_path or config.DECOY_AUTH_CLASS
    strategy = load_auth_class(dotted_path)()
    logger.info(f"Using auth strategy {dotted_path}")
    return strategy
