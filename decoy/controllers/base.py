"""
Base admin controller.

Admin controllers describe a resource: which model it manages and, when it
is nested, which controller is its parent and how the two models point at
each other. Anything not declared is deduced by naming convention, either
from the controller's own name (ArticlesController manages Article) or by
Ancestry from the current request.
"""

import logging
from typing import List, NamedTuple, Optional, Tuple, Union

from decoy.controllers.registry import ControllerRegistry, registry as default_registry
from decoy.core.inflection import CONTROLLER_SUFFIX, class_basename, singular, slugify_class
from decoy.db.base import find_model

logger = logging.getLogger(__name__)


class RouteAction(NamedTuple):
    """A controller action that the URL generator can turn into a path."""

    controller: type
    action: str = "index"
    id: Optional[str] = None


class Base:
    """
    Base class for admin controllers.

    Subclasses may declare any of these class attributes to override the
    conventions:

    Attributes:
        MODEL: Model class managed by the controller.
        PARENT_CONTROLLER: Parent controller class or registered name.
        PARENT_MODEL: Model class of the parent.
        PARENT_TO_SELF: Relationship on the parent model pointing here.
        SELF_TO_PARENT: Relationship on MODEL pointing at the parent.
        SLUG: URL slug, defaults to the dasherized class name.
        TITLE: Human readable title.
        RELATED: Controllers, by name, listed on this controller's edit page.
    """

    MODEL: Optional[type] = None
    PARENT_CONTROLLER: Union[type, str, None] = None
    PARENT_MODEL: Optional[type] = None
    PARENT_TO_SELF: Optional[str] = None
    SELF_TO_PARENT: Optional[str] = None
    SLUG: Optional[str] = None
    TITLE: Optional[str] = None
    RELATED: Tuple[str, ...] = ()

    registry: ControllerRegistry = default_registry

    def __init_subclass__(cls, register: bool = True, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if register:
            cls.registry.register(cls)

    def __init__(self) -> None:
        self._parent_controller = self.PARENT_CONTROLLER
        self._parent_model = self.PARENT_MODEL
        self._parent_to_self = self.PARENT_TO_SELF
        self._self_to_parent = self.SELF_TO_PARENT
        self.parent_id: Optional[str] = None

    # ======================
    # Metadata
    # ======================

    @classmethod
    def slug(cls) -> str:
        return cls.SLUG or slugify_class(cls)

    @classmethod
    def title(cls) -> str:
        if cls.TITLE:
            return cls.TITLE
        return cls.slug().replace("-", " ").title()

    @classmethod
    def model(cls) -> Optional[type]:
        """
        Get the model this controller manages.

        Unless MODEL is declared, the model is the singular form of the
        controller name, ex: SuperSlidesController -> SuperSlide.
        """
        if cls.MODEL is not None:
            return cls.MODEL
        name = class_basename(cls)
        if name.endswith(CONTROLLER_SUFFIX):
            name = name[: -len(CONTROLLER_SUFFIX)]
        return find_model(singular(name))

    def parent_controller(self) -> Optional[type]:
        if isinstance(self._parent_controller, str):
            self._parent_controller = self.registry.get(self._parent_controller)
        return self._parent_controller

    def parent_model(self) -> Optional[type]:
        return self._parent_model

    def parent_to_self(self) -> Optional[str]:
        return self._parent_to_self

    def self_to_parent(self) -> Optional[str]:
        return self._self_to_parent

    def controller(self, action: str = "index", id: Optional[str] = None) -> RouteAction:
        """Describe one of this controller's actions for URL generation."""
        return RouteAction(type(self), action, id)

    def related(self) -> List[type]:
        """Controllers whose lists are rendered on this controller's edit page."""
        return [self.registry.get(name) for name in self.RELATED]

    # ======================
    # Ancestry
    # ======================

    def resolve_ancestry(self, ancestry) -> bool:
        """
        Fill in the parent details that weren't declared, using Ancestry.

        Declared values always win over deduced ones. Nothing changes
        unless the controller is acting as a child in this request.

        Args:
            ancestry: decoy.routing.ancestry.Ancestry built for this controller.

        Returns:
            Whether the controller is acting as a child.

        Raises:
            AncestryError: If a relationship can't be deduced.
        """
        if not ancestry.is_child_route():
            return False

        if self._parent_controller is None:
            self._parent_controller = ancestry.deduce_parent_controller()
        parent = self.parent_controller()

        if self._parent_model is None and parent is not None:
            self._parent_model = parent.model()
        if self._parent_to_self is None:
            self._parent_to_self = ancestry.deduce_parent_relationship()
        if self._self_to_parent is None:
            self._self_to_parent = ancestry.deduce_child_relationship()

        self.parent_id = ancestry.parent_id()
        logger.debug(
            f"{type(self).__name__} is a child of {class_basename(parent) if parent else None} "
            f"via {self._parent_to_self}/{self._self_to_parent}"
        )
        return True
