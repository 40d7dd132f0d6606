"""
Relationship lookups on mapped models.

Ancestry guesses relationship names by convention and then needs to know
whether a guess exists on a model and what kind of relationship it is.
Both answers come from the SQLAlchemy mapper, so no model is ever
instantiated to find out.

Polymorphic ("-able") associations have no first-class SQLAlchemy construct;
models expose them as plain Python properties, ex: Image.imageable.
"""

import enum
import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.orm import MANYTOMANY, MANYTOONE, ONETOMANY

logger = logging.getLogger(__name__)

POLYMORPHIC_SUFFIX = "able"


class RelationKind(str, enum.Enum):
    """Kinds of relationship an accessor can represent."""

    MANY_TO_ONE = "many_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"
    POLYMORPHIC = "polymorphic"


_DIRECTIONS = {
    MANYTOONE: RelationKind.MANY_TO_ONE,
    ONETOMANY: RelationKind.ONE_TO_MANY,
    MANYTOMANY: RelationKind.MANY_TO_MANY,
}


def relation_kind(model: Optional[type], name: str) -> Optional[RelationKind]:
    """
    Get the kind of relationship a model exposes under a name.

    Args:
        model: A mapped model class.
        name: Accessor name, ex: "slides".

    Returns:
        The RelationKind, or None if the model has no such relationship.
        Columns and ordinary methods are not relationships.
    """
    if model is None or not name:
        return None

    try:
        mapper = inspect(model)
    except NoInspectionAvailable:
        logger.debug(f"{model!r} is not a mapped class")
        return None

    relationship = mapper.relationships.get(name)
    if relationship is not None:
        return _DIRECTIONS[relationship.direction]

    if isinstance(getattr(model, name, None), property):
        return RelationKind.POLYMORPHIC

    return None


def has_accessor(model: Optional[type], name: str) -> bool:
    """Check whether a model exposes a relationship accessor by that name."""
    return relation_kind(model, name) is not None


def is_polymorphic_name(name: str) -> bool:
    """Relationship names ending in "able" are polymorphic by convention."""
    return name.endswith(POLYMORPHIC_SUFFIX)
