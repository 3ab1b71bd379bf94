"""Database connection and session management."""

import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def get_database_url() -> str:
    """Get the reminder store connection URL from the environment.

    :returns: The SQLAlchemy database URL.
    :raises KeyError: If DATABASE_URL is not set.
    """
    return os.environ["DATABASE_URL"]


def create_db_engine(*, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the database.

    :param echo: If True, log all SQL statements.
    :returns: A configured SQLAlchemy engine.
    """
    return create_engine(get_database_url(), echo=echo, pool_pre_ping=True)


@dataclass
class _DatabaseState:
    """Container for database connection state."""

    engine: Engine | None = field(default=None)
    session_factory: sessionmaker[Session] | None = field(default=None)


_state = _DatabaseState()


def get_engine() -> Engine:
    """Get or create the database engine singleton.

    :returns: The database engine.
    """
    if _state.engine is None:
        _state.engine = create_db_engine()
    return _state.engine


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the session factory singleton.

    :returns: A sessionmaker bound to the database engine.
    """
    if _state.session_factory is None:
        _state.session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _state.session_factory


@contextmanager
def get_session(factory: sessionmaker[Session] | None = None) -> Iterator[Session]:
    """Create a new database session with automatic cleanup.

    Commits on successful completion, rolls back on exception.

    :param factory: Session factory to use. Defaults to the process-wide factory.
    :yields: A database session.
    """
    session = (factory or get_session_factory())()
    try:
        yield session
        session.commit()

    except Exception:
        session.rollback()
        raise

    finally:
        session.close()


def dispose_engine() -> None:
    """Dispose of the engine singleton and its connection pool, if created."""
    if _state.engine is not None:
        _state.engine.dispose()
    _state.engine = None
    _state.session_factory = None
