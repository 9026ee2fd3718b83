"""
Shared dependencies for FastAPI routes
"""
from typing import Generator
from sqlalchemy.orm import Session, sessionmaker

from grounded.database.session import get_session, get_session_factory


def get_db() -> Generator:
    """
    Database session dependency.
    Yields a database session from the pool and ensures it's closed after use.
    """
    db = get_session()
    try:
        yield db
    finally:
        db.close()


def get_db_session_factory() -> sessionmaker:
    """
    Session factory dependency, for services that open one session per
    concurrent read.
    """
    return get_session_factory()
