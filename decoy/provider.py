"""
Service provider that plugs the admin into a FastAPI application.

register() installs what has to exist before any request is handled;
boot() reads configuration, loads controllers and the auth strategy, and
mounts the admin routes.
"""

import importlib
import logging
from typing import Iterable, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from decoy.api.endpoints import admin_router, auth_router
from decoy.api.schemas.common import DecoySettings
from decoy.controllers.registry import ControllerRegistry, registry as default_registry
from decoy.core import config
from decoy.core.auth import load_auth_strategy
from decoy.core.exceptions import DecoyException, format_exception, status_code_for

logger = logging.getLogger(__name__)


async def handle_decoy_exception(request: Request, exc: DecoyException) -> JSONResponse:
    """Render admin exceptions in the standard error format."""
    logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code_for(exc),
        content=format_exception(exc).model_dump(),
    )


class DecoyServiceProvider:
    """
    Wire the admin into an application.

    Args:
        app: The host FastAPI application.
        registry: Controller registry the admin routes resolve against.
    """

    # Loading is never deferred, the admin routes must exist at startup
    defer = False

    def __init__(self, app: FastAPI, registry: Optional[ControllerRegistry] = None):
        self.app = app
        self.registry = registry if registry is not None else default_registry

    def register(self) -> None:
        """Install the admin's exception handling."""
        self.app.add_exception_handler(DecoyException, handle_decoy_exception)

    def boot(
        self,
        auth_class: Optional[str] = None,
        controller_modules: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Bootstrap the admin.

        Args:
            auth_class: Dotted path of the auth strategy, defaults to
                DECOY_AUTH_CLASS.
            controller_modules: Modules defining controllers, defaults to
                DECOY_CONTROLLER_MODULES.

        Raises:
            AuthConfigurationError: If the auth class is unusable.
        """
        settings = DecoySettings(
            dir=config.DECOY_DIR,
            upload_delete=config.UPLOAD_DELETE,
            upload_old=config.UPLOAD_OLD,
            upload_replace=config.UPLOAD_REPLACE,
            format_date=config.FORMAT_DATE,
            format_datetime=config.FORMAT_DATETIME,
            format_time=config.FORMAT_TIME,
        )
        self.app.state.decoy = settings

        # Controllers register themselves as their modules are imported
        modules = config.DECOY_CONTROLLER_MODULES if controller_modules is None else controller_modules
        for module in modules:
            importlib.import_module(module)
        self.app.state.controllers = self.registry
        logger.info(f"Loaded {len(self.registry)} admin controllers")

        self.app.state.auth = load_auth_strategy(auth_class)

        # Explicit routes come before the wildcard so they aren't swallowed by it
        self.app.include_router(auth_router, prefix=f"/{settings.dir}")
        self.app.include_router(admin_router, prefix=f"/{settings.dir}")

    def provides(self) -> List[str]:
        """Get the services provided by the provider."""
        return []
