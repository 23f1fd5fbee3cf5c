"""
Database module - SQLAlchemy engine and session helpers.
"""
from copilot.db.database import (
    get_engine,
    get_db_session,
    init_schema,
    check_database_connection,
)

__all__ = [
    "get_engine",
    "get_db_session",
    "init_schema",
    "check_database_connection",
]
