"""
Parent/child deduction between admin controllers.

This class tries to figure out if the injected controller has parents and
who they are. There is an assumption with this logic that ancestry only
matters to controllers that were resolved through Wildcard: nested routes
are never registered explicitly.

A controller can be acting as a child in one of three ways, checked in
this order:
- It is nested in the URL, ex: /admin/articles/2/slides
- Its request carries a parent_controller field (many to many XHR)
- It renders a related list on another controller's edit page
"""

import logging
from typing import Optional

from decoy.controllers.base import Base
from decoy.core.exceptions import ParentControllerError, RelationshipMissingError
from decoy.core.inflection import class_basename, lcfirst, plural
from decoy.db.relations import RelationKind, has_accessor, is_polymorphic_name, relation_kind
from decoy.routing.request import RequestSnapshot
from decoy.routing.url_generator import UrlGenerator
from decoy.routing.wildcard import Wildcard

logger = logging.getLogger(__name__)

# Input field naming the parent controller on many to many XHR requests
PARENT_CONTROLLER_INPUT = "parent_controller"


class Ancestry:
    """
    Deduce whether a controller is acting as a child, and of whom.

    Args:
        controller: The controller instance being asked about.
        wildcard: Resolution of the current request path.
        input: Snapshot of the current request.
        url_generator: Used to find the controller's own URL.
    """

    def __init__(
        self,
        controller: Base,
        wildcard: Wildcard,
        input: RequestSnapshot,
        url_generator: UrlGenerator,
    ):
        self.controller = controller
        self.wildcard = wildcard
        self.input = input
        self.url_generator = url_generator

    def is_child_route(self) -> bool:
        """
        Test if the controller is acting in a child role in this request.
        """
        return (
            self.request_is_child()
            or self.parent_is_in_input()
            or self.is_acting_as_related()
        )

    def request_is_child(self) -> bool:
        """
        Test if the current URL is for the controller acting as a child.

        Only wildcarded routes are considered, since nested routes are
        never registered explicitly.
        """
        classes = self.wildcard.get_all_classes()

        # The first class is the top of the URL and never a child
        if len(classes) <= 1:
            return False
        return type(self.controller) in classes[1:]

    def parent_is_in_input(self) -> bool:
        """
        Test if the request is one of the many to many XHR requests.
        """
        # Other controller instances built while handling this request
        # (sidebar lists, etc) must not be informed by its input
        if not self.is_route_controller():
            return False
        return self.input.has(PARENT_CONTROLLER_INPUT)

    def is_acting_as_related(self) -> bool:
        """
        Test if the controller is rendering a related list within another
        controller's edit page.
        """
        # A controller that appears in the URL is not a related list of it.
        # Compare the controller's own index URL against the current path.
        own_url = self.url_generator.action(self.controller.controller())  # ex: /admin/slides
        if own_url in "/" + self.input.path():
            return False

        return self.wildcard.detect_action() == "edit"

    def is_route_controller(self) -> bool:
        """Test if the request is addressed to this controller."""
        return self.wildcard.detect_controller() is type(self.controller)

    def is_child_in_many_to_many(self) -> bool:
        """
        Test whether the controller's relationship to its parent is a
        many to many.

        Unlike is_child_route() this looks at the kind of relationship,
        not at the request.
        """
        relationship = self.controller.self_to_parent()
        if not relationship:
            return False

        # "-able" relationships are polymorphic one to many
        if is_polymorphic_name(relationship):
            return False

        kind = relation_kind(self.controller.model(), relationship)
        if kind is None:
            logger.debug(
                f"{type(self.controller).__name__} declares '{relationship}' "
                f"but {self.controller.model()!r} has no such relationship"
            )
        return kind is RelationKind.MANY_TO_MANY

    def deduce_parent_controller(self) -> Optional[type]:
        """
        Guess the parent controller from the input or the route.

        Returns:
            Parent controller class, or None if there is no parent.

        Raises:
            ControllerNotFoundError: If the input names an unknown controller.
        """
        if self.parent_is_in_input():
            return self.wildcard.registry.get(self.input.input(PARENT_CONTROLLER_INPUT))

        if self.request_is_child():
            return self.get_parent_controller()

        # A related list's parent is whatever the page is for
        if self.is_acting_as_related():
            return self.wildcard.detect_controller()

        return None

    def get_parent_controller(self) -> type:
        """
        Get the controller that precedes this one in the route.

        Raises:
            ParentControllerError: If the controller isn't nested in the route.
        """
        classes = self.wildcard.get_all_classes()
        controller = type(self.controller)
        if controller in classes:
            i = classes.index(controller)
            if i > 0:
                return classes[i - 1]
        raise ParentControllerError(controller.__name__)

    def deduce_parent_relationship(self) -> str:
        """
        Guess the relationship on the parent model that points at this
        controller's model.

        If Article has many SuperSlide, Article has a "superSlides"
        relationship.

        Raises:
            RelationshipMissingError: If the parent model has no such relationship.
        """
        model = class_basename(self.controller.model())
        relationship = plural(lcfirst(model))

        parent_model = self.controller.parent_model()
        if not has_accessor(parent_model, relationship):
            raise RelationshipMissingError(
                "parent",
                [relationship],
                controller=type(self.controller).__name__,
                model=repr(parent_model),
            )
        return relationship

    def deduce_child_relationship(self) -> str:
        """
        Guess the relationship on this controller's model that points back
        at the parent.

        If Post has many Image, Image has a "post" relationship. Many to
        many relationships are plural ("posts") and polymorphic ones are
        named after the model ("imageable").

        Raises:
            RelationshipMissingError: If none of the guesses exist.
        """
        model = self.controller.model()
        name = class_basename(model)

        singular_name = lcfirst(class_basename(self.controller.parent_model()))
        candidates = [
            singular_name,
            plural(singular_name),
            name.lower() + "able",
        ]
        for relationship in candidates:
            if has_accessor(model, relationship):
                return relationship

        raise RelationshipMissingError(
            "child",
            candidates,
            controller=type(self.controller).__name__,
            model=name,
        )

    def parent_id(self) -> Optional[str]:
        """Get the parent record's id from the route, or None."""
        if not self.request_is_child():
            return None
        return self.wildcard.detect_parent_id()
