"""
Schemas describing how an admin request was resolved.

The wildcard endpoint answers with the controller and action the URL maps
to, plus everything Ancestry could deduce about its parent. Breadcrumbs and
nested forms are built from this.
"""

from typing import List, Optional

from pydantic import Field

from decoy.api.schemas.common import BaseSchema


class AncestrySummary(BaseSchema):
    """
    Parent/child information for one controller in the current request.

    Attributes:
        controller: Class name of the controller.
        slug: URL slug of the controller.
        is_child: Whether the controller is acting as a child.
        parent_controller: Class name of the deduced parent, if any.
        parent_id: Id of the parent record taken from the URL, if any.
        parent_to_self: Relationship on the parent model pointing here.
        self_to_parent: Relationship on this model pointing at the parent.
        many_to_many: Whether the child sits in a many-to-many relationship.
    """

    controller: str
    slug: str
    is_child: bool = False
    parent_controller: Optional[str] = None
    parent_id: Optional[str] = None
    parent_to_self: Optional[str] = None
    self_to_parent: Optional[str] = None
    many_to_many: bool = False


class AncestryResponse(AncestrySummary):
    """Resolution of an admin wildcard request."""

    action: str = Field(..., description="Detected controller action")
    id: Optional[str] = Field(default=None, description="Id of the addressed record")
    title: Optional[str] = None
    related: List[AncestrySummary] = Field(
        default_factory=list,
        description="Related lists rendered on edit pages",
    )
