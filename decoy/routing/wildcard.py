"""
Wildcard route resolution for the admin.

Admin URLs are never registered one by one. Instead, a single catch-all
route hands the path to Wildcard, which reads it as alternating controller
slugs and record ids, optionally followed by an action:

    /admin/articles                     ArticlesController@index
    /admin/articles/create              ArticlesController@create
    /admin/articles/2/edit              ArticlesController@edit
    /admin/articles/2/slides            SlidesController@index, parent 2
    /admin/articles/2/slides/5/edit     SlidesController@edit, parent 2
"""

import logging
from typing import List, Optional, Tuple

from decoy.controllers.registry import ControllerRegistry, registry as default_registry

logger = logging.getLogger(__name__)

# Actions that can trail a path, everything else is inferred from the verb
ACTIONS = ("create", "edit", "destroy", "attach", "remove", "autocomplete")


class Wildcard:
    """
    Resolve an admin path to controllers, ids and an action.

    Args:
        dir: Admin URL directory, ex: "admin".
        verb: HTTP verb of the request.
        path: Full request path, ex: "/admin/articles/2/slides".
        registry: Controller registry used to map slugs to classes.
    """

    def __init__(
        self,
        dir: str,
        verb: str,
        path: str,
        registry: Optional[ControllerRegistry] = None,
    ):
        self.dir = dir.strip("/")
        self.verb = verb.upper()
        self.path = path
        self.registry = registry if registry is not None else default_registry

        self.slugs: List[str] = []
        self.ids: List[str] = []
        self.action: Optional[str] = None
        self._parse()

    def _parse(self) -> None:
        segments = [s for s in self.path.strip("/").split("/") if s]
        if self.dir:
            if not segments or segments[0] != self.dir:
                return
            segments = segments[1:]

        if segments and len(segments) > 1 and segments[-1] in ACTIONS:
            self.action = segments.pop()

        # Even positions are slugs, odd positions are ids
        self.slugs = segments[0::2]
        self.ids = segments[1::2]

    def _known_positions(self) -> List[Tuple[int, type]]:
        """Slug positions that map to a registered controller, with the class."""
        known = []
        for position, slug in enumerate(self.slugs):
            controller = self.registry.find_by_slug(slug)
            if controller is None:
                logger.debug(f"No controller registered for slug '{slug}'")
                continue
            known.append((position, controller))
        return known

    def get_all_classes(self) -> List[type]:
        """
        Get every controller represented in the path, outermost first.

        Slugs that don't map to a registered controller are skipped.
        """
        return [controller for _, controller in self._known_positions()]

    def unknown_slugs(self) -> List[str]:
        """Slugs in the path that no registered controller answers to."""
        return [slug for slug in self.slugs if self.registry.find_by_slug(slug) is None]

    def detect_controller(self) -> Optional[type]:
        """Get the controller the path addresses, the innermost one."""
        if not self.slugs:
            return None
        return self.registry.find_by_slug(self.slugs[-1])

    def detect_action(self) -> Optional[str]:
        """
        Get the action the request is for.

        Returns:
            Action name, or None if the path addresses no controller.
        """
        if not self.slugs:
            return None
        if self.action:
            return self.action

        has_id = self.detect_id() is not None
        if self.verb in ("GET", "HEAD"):
            return "edit" if has_id else "index"
        if self.verb == "POST":
            return "update" if has_id else "store"
        if self.verb in ("PUT", "PATCH"):
            return "update"
        if self.verb == "DELETE":
            return "destroy"
        return None

    def detect_id(self) -> Optional[str]:
        """Get the id of the record the path addresses."""
        if self.slugs and len(self.ids) == len(self.slugs):
            return self.ids[-1]
        return None

    def detect_parent_id(self) -> Optional[str]:
        """
        Get the id of the parent record.

        The parent is the registered controller preceding the innermost one,
        so the id is the one following that controller's slug. Unregistered
        slugs in between are not parents.
        """
        known = self._known_positions()
        if len(known) < 2:
            return None
        position = known[-2][0]
        if position >= len(self.ids):
            return None
        return self.ids[position]
