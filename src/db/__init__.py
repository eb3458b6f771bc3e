"""Database module."""

from src.db.database import (
    async_session_maker,
    dispose_db,
    get_db,
    init_db,
)

__all__ = [
    "async_session_maker",
    "dispose_db",
    "get_db",
    "init_db",
]
