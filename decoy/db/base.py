"""
SQLAlchemy base model and declarative metadata.

Admin models and the models managed through admin controllers should
inherit from this Base class, so controllers can find them by name.
"""

from typing import Optional

from sqlalchemy.orm import DeclarativeBase

from decoy.db.meta import metadata


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Models should inherit from this class and define their table
    using __tablename__ attribute.
    """

    metadata = metadata

    def __repr__(self) -> str:
        """
        Generate string representation of the model.

        Override this in subclasses for custom representation.
        """
        attrs = []
        for column in self.__table__.columns:
            if column.primary_key:
                value = getattr(self, column.name, None)
                if value is not None:
                    attrs.append(f"{column.name}={value}")
        return f"<{self.__class__.__name__}({', '.join(attrs)})>"


def find_model(name: str) -> Optional[type]:
    """
    Look up a mapped model class by its simple class name.

    Args:
        name: Class name, ex: "Article".

    Returns:
        The mapped class, or None if no model has that name.
    """
    for mapper in Base.registry.mappers:
        if mapper.class_.__name__ == name:
            return mapper.class_
    return None
