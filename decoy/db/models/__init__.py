"""
Database models package.

This package contains the SQLAlchemy ORM models owned by the admin.
Models managed through admin controllers belong to the host application.
"""

from decoy.db.models.admin import Admin

# Tables created by init_db()
ADMIN_TABLES = [Admin.__table__]

__all__ = [
    "ADMIN_TABLES",
    "Admin",
]
