"""
Registry of admin controllers.

Admin routes are never declared one by one; the wildcard resolver maps URL
slugs onto controllers through this registry instead. Every subclass of
decoy.controllers.base.Base adds itself to the default registry when it is
defined.
"""

import logging
from typing import Dict, Iterator, Optional, Union

from decoy.core.exceptions import ControllerNotFoundError
from decoy.core.inflection import class_basename

logger = logging.getLogger(__name__)


class ControllerRegistry:
    """
    Maps slugs, class names and dotted paths to controller classes.
    """

    def __init__(self) -> None:
        self._by_slug: Dict[str, type] = {}
        self._by_name: Dict[str, type] = {}

    def register(self, controller: type) -> type:
        """
        Add a controller to the registry.

        Args:
            controller: Controller class, must expose slug().

        Returns:
            The controller, so this can be used as a decorator.
        """
        slug = controller.slug()
        existing = self._by_slug.get(slug)
        if existing is not None and existing is not controller:
            logger.warning(
                f"Slug '{slug}' was registered to {dotted_path(existing)}, "
                f"replacing with {dotted_path(controller)}"
            )
            self._forget_names(existing)
        self._by_slug[slug] = controller
        self._by_name[controller.__name__] = controller
        self._by_name[dotted_path(controller)] = controller
        return controller

    def _forget_names(self, controller: type) -> None:
        for key in [k for k, v in self._by_name.items() if v is controller]:
            del self._by_name[key]

    def unregister(self, controller: type) -> None:
        """Remove a controller from the registry."""
        for index in (self._by_slug, self._by_name):
            for key in [k for k, v in index.items() if v is controller]:
                del index[key]

    def find_by_slug(self, slug: str) -> Optional[type]:
        """Get the controller routed under a slug, or None."""
        return self._by_slug.get(slug)

    def find(self, name: Union[str, type]) -> Optional[type]:
        """
        Get a controller by class name, dotted path or slug.

        Args:
            name: ex: "ArticlesController", "app.admin.ArticlesController"
                or "articles". Classes are returned if registered.

        Returns:
            The controller class, or None.
        """
        if isinstance(name, type):
            return name if name in self else None
        if not isinstance(name, str):
            return None
        return (
            self._by_name.get(name)
            or self._by_name.get(class_basename(name))
            or self._by_slug.get(name)
        )

    def get(self, name: Union[str, type]) -> type:
        """
        Like find(), but raise if nothing matches.

        Raises:
            ControllerNotFoundError: If the name isn't registered.
        """
        controller = self.find(name)
        if controller is None:
            raise ControllerNotFoundError(str(name))
        return controller

    def __contains__(self, controller: object) -> bool:
        return controller in self._by_slug.values()

    def __iter__(self) -> Iterator[type]:
        return iter(list(self._by_slug.values()))

    def __len__(self) -> int:
        return len(self._by_slug)


def dotted_path(controller: type) -> str:
    """ex: app.admin.ArticlesController"""
    return f"{controller.__module__}.{controller.__qualname__}"


# Default registry that Base subclasses register with
registry = ControllerRegistry()
