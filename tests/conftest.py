"""Shared pytest fixtures for vamos tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vamos.db.schema import Base


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def make_client():
    """Factory building an app bound to a given engine, wrapped in a TestClient."""
    from vamos.api.app import create_app, get_db_session

    def _make_client(engine, **app_kwargs) -> TestClient:
        app = create_app(**app_kwargs)

        def override_get_db():
            with Session(engine) as session:
                yield session

        app.dependency_overrides[get_db_session] = override_get_db
        return TestClient(app)

    return _make_client
