# Database module
from decoy.db.connection import (
    async_engine,
    async_session_factory,
    close_db,
    engine_options,
    get_db,
    get_db_context,
    init_db,
)

__all__ = [
    "async_engine",
    "async_session_factory",
    "close_db",
    "engine_options",
    "get_db",
    "get_db_context",
    "init_db",
]
