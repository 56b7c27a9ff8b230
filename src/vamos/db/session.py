"""Database session management.

Provides session factory for SQLite database access with proper
thread-safety for FastAPI concurrency.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vamos.config import DB_PATH
from vamos.db.schema import Base

# Engines and session factories cached by resolved db path
_engine_cache: dict[str, Engine] = {}
_session_factory_cache: dict[str, sessionmaker] = {}


def _cache_key(db_path: Path | None) -> tuple[Path, str]:
    path = Path(db_path) if db_path is not None else DB_PATH
    return path, str(path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the catalog database.

    Engines are cached by resolved db_path, so repeated calls with the
    same path share one connection pool.

    Args:
        db_path: Path to SQLite database file. Defaults to VAMOS_DB_PATH.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    path, key = _cache_key(db_path)

    if key in _engine_cache:
        return _engine_cache[key]

    path.parent.mkdir(parents=True, exist_ok=True)

    # check_same_thread=False: routes run on FastAPI's thread pool
    engine = create_engine(
        f"sqlite:///{path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _engine_cache[key] = engine

    return engine


def _get_session_factory(db_path: Path | None = None) -> sessionmaker:
    _, key = _cache_key(db_path)

    if key not in _session_factory_cache:
        _session_factory_cache[key] = sessionmaker(bind=get_engine(db_path))

    return _session_factory_cache[key]


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session. For automatic
    resource management, use get_db_session() instead.
    """
    factory = _get_session_factory(db_path)
    return factory()


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Example:
        with get_db_session() as session:
            repo.add_source(session, link="dQw4w9WgXcQ", is_video=True)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create the catalog schema if it does not exist yet."""
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
