"""
Admin wildcard endpoint.

Every admin URL that isn't handled elsewhere lands here. The path is
resolved to a controller and action by Wildcard, and the answer describes
the controller's ancestry so the client can build breadcrumbs and nested
forms.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from decoy.api.dependencies import (
    CurrentAdmin,
    get_auth,
    get_request_snapshot,
    get_url_generator,
    get_wildcard,
)
from decoy.api.schemas.ancestry import AncestryResponse, AncestrySummary
from decoy.controllers.base import Base
from decoy.core.auth import AuthInterface
from decoy.core.exceptions import HTTPForbiddenException, HTTPNotFoundException
from decoy.routing.ancestry import Ancestry
from decoy.routing.request import RequestSnapshot
from decoy.routing.url_generator import UrlGenerator
from decoy.routing.wildcard import Wildcard

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"])


def summarize(
    controller: Base,
    wildcard: Wildcard,
    snapshot: RequestSnapshot,
    url_generator: UrlGenerator,
) -> AncestrySummary:
    """
    Resolve and describe a controller's ancestry for the current request.

    Raises:
        AncestryError: If the controller is a child but its relationships
            can't be deduced.
    """
    ancestry = Ancestry(controller, wildcard, snapshot, url_generator)
    is_child = controller.resolve_ancestry(ancestry)
    parent = controller.parent_controller() if is_child else None

    return AncestrySummary(
        controller=type(controller).__name__,
        slug=controller.slug(),
        is_child=is_child,
        parent_controller=parent.__name__ if parent else None,
        parent_id=controller.parent_id,
        parent_to_self=controller.parent_to_self() if is_child else None,
        self_to_parent=controller.self_to_parent() if is_child else None,
        many_to_many=ancestry.is_child_in_many_to_many(),
    )


@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_model=AncestryResponse,
    summary="Resolve admin route",
    description="Resolve an admin URL to its controller, action and ancestry.",
)
async def resolve(
    path: str,
    admin: CurrentAdmin,
    auth: Annotated[AuthInterface, Depends(get_auth)],
    wildcard: Annotated[Wildcard, Depends(get_wildcard)],
    snapshot: Annotated[RequestSnapshot, Depends(get_request_snapshot)],
    url_generator: Annotated[UrlGenerator, Depends(get_url_generator)],
) -> AncestryResponse:
    """
    Resolve an admin request.
    """
    controller_class = wildcard.detect_controller()
    if controller_class is None:
        raise HTTPNotFoundException(f"No admin controller for '{path}'")

    # Nested paths are only meaningful when every segment is a controller
    unknown = wildcard.unknown_slugs()
    if unknown:
        raise HTTPNotFoundException(f"No admin controller for '{unknown[0]}' in '{path}'")

    action = wildcard.detect_action()
    if not auth.can(admin, action, controller_class):
        logger.info(f"{auth.user_name(admin)} denied {controller_class.__name__}@{action}")
        raise HTTPForbiddenException(f"Not allowed to {action} {controller_class.title()}")

    controller = controller_class()
    summary = summarize(controller, wildcard, snapshot, url_generator)

    # Edit pages render the lists of related controllers
    related = []
    if action == "edit":
        related = [
            summarize(related_class(), wildcard, snapshot, url_generator)
            for related_class in controller.related()
        ]

    return AncestryResponse(
        **summary.model_dump(),
        action=action,
        id=wildcard.detect_id(),
        title=controller_class.title(),
        related=related,
    )
