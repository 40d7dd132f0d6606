"""
Generate admin URLs for controller actions.

The inverse of Wildcard: given a controller action, build the path the
wildcard resolver would map back to it.
"""

from typing import Optional

from decoy.controllers.base import RouteAction


class UrlGenerator:
    """
    Build admin paths.

    Args:
        dir: Admin URL directory, ex: "admin".
    """

    def __init__(self, dir: str):
        self.dir = dir.strip("/")

    def action(self, route_action: RouteAction, parent: Optional[str] = None) -> str:
        """
        Get the path of a controller action.

        Args:
            route_action: Controller, action and optional record id.
            parent: Optional path prefix of a parent record,
                ex: "articles/2", to build nested URLs.

        Returns:
            Absolute path, ex: "/admin/articles" or "/admin/articles/2/edit".
        """
        controller, action, id = route_action
        parts = [self.dir] if self.dir else []
        if parent:
            parts.append(parent.strip("/"))
        parts.append(controller.slug())

        if action in ("index", "store"):
            pass
        elif action == "create":
            parts.append("create")
        elif id is None:
            raise ValueError(f"The '{action}' action needs a record id")
        elif action in ("edit", "update"):
            parts.append(str(id))
            if action == "edit":
                parts.append("edit")
        else:
            parts.extend([str(id), action])

        return "/" + "/".join(parts)
