"""
Admin model for users of the admin panel.

This model handles:
- Admin login credentials
- Display names for the admin header
- Developer flag for access to developer-only tools
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Index,
    String,
    Uuid,
)

from decoy.db.base import Base


class Admin(Base):
    """
    Admin model for authentication.

    Attributes:
        id: Unique identifier (UUID primary key)
        email: Admin's email address (unique)
        password_hash: Bcrypt hashed password
        first_name: Admin's first name
        last_name: Admin's last name
        is_active: Whether the admin can log in
        is_developer: Whether the admin sees developer tools
        last_login_at: Timestamp of last login
        created_at: Record creation timestamp
        updated_at: Record last update timestamp
    """

    __tablename__ = "admins"
    __table_args__ = (
        Index("ix_admins_email", "email"),
    )

    # Primary key
    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # Authentication fields
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        doc="Admin's email address",
    )
    password_hash = Column(
        String(255),
        nullable=False,
        doc="Bcrypt hashed password",
    )

    # Profile fields
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)

    # Status
    is_active = Column(Boolean, default=True, nullable=False)
    is_developer = Column(Boolean, default=False, nullable=False)
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, email={self.email})>"

    @property
    def full_name(self) -> str:
        """First and last name, falling back to the email."""
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.email
