from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from contextlib import contextmanager
from typing import Optional
import logging

from copilot.core.config import get_settings

logger = logging.getLogger(__name__)

# Global engine (created lazily so tests can inject their own)
_engine: Optional[Engine] = None

# List columns (skills, required_skills, technologies, ...) are stored as
# JSON text so the same DDL runs on PostgreSQL and SQLite.
SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS students (
        id VARCHAR(36) PRIMARY KEY,
        name TEXT NOT NULL,
        email VARCHAR(320) NOT NULL UNIQUE,
        year INTEGER NOT NULL,
        skills TEXT NOT NULL DEFAULT '[]',
        interests TEXT NOT NULL DEFAULT '[]',
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS internships (
        id VARCHAR(36) PRIMARY KEY,
        catalog_order INTEGER NOT NULL,
        title TEXT NOT NULL,
        company TEXT NOT NULL,
        location TEXT NOT NULL,
        stipend TEXT NOT NULL,
        duration TEXT NOT NULL,
        required_skills TEXT NOT NULL DEFAULT '[]',
        description TEXT NOT NULL,
        source TEXT,
        url TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS projects (
        id VARCHAR(36) PRIMARY KEY,
        catalog_order INTEGER NOT NULL,
        title TEXT NOT NULL,
        description TEXT NOT NULL,
        difficulty VARCHAR(20) NOT NULL,
        duration TEXT NOT NULL,
        technologies TEXT NOT NULL DEFAULT '[]',
        features TEXT NOT NULL DEFAULT '[]'
    )
    """,
]


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    pool_size=5 / max_overflow=10 only apply to server databases;
    SQLite picks its own pool class.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(url, pool_size=5, max_overflow=10, echo=echo)


def get_engine() -> Engine:
    """Get or create the application engine (singleton pattern)"""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_db_engine(settings.database_url, echo=settings.debug)
    return _engine


@contextmanager
def get_db_session(engine: Optional[Engine] = None):
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM students"))
    """
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine or get_engine())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def execute_raw_sql(sql: str, params: dict = None, engine: Optional[Engine] = None) -> list:
    """
    Execute raw SQL and return results as list of dicts.
    """
    with get_db_session(engine) as db:
        result = db.execute(text(sql), params or {})
        columns = result.keys()
        return [dict(zip(columns, row)) for row in result.fetchall()]


def init_schema(engine: Optional[Engine] = None) -> None:
    """Create tables if they don't exist yet. Safe to call repeatedly."""
    with get_db_session(engine) as db:
        for statement in SCHEMA_STATEMENTS:
            db.execute(text(statement))
    logger.info("Database schema ready")


def check_database_connection(engine: Optional[Engine] = None) -> bool:
    """
    Check if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session(engine) as db:
            row = db.execute(text("SELECT 1 as test")).fetchone()
            return row[0] == 1
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        return False
