"""Tests for database session management."""

import pytest

from vamos.db import repo
from vamos.db.session import get_db_session, get_engine, get_session, init_db


class TestEngineCache:
    """Engines are cached per database path."""

    def test_same_path_same_engine(self, tmp_path):
        """Repeated calls share one engine."""
        db_path = tmp_path / "vamos.db"
        assert get_engine(db_path) is get_engine(db_path)

    def test_creates_parent_directory(self, tmp_path):
        """Missing parent directories are created."""
        db_path = tmp_path / "nested" / "dir" / "vamos.db"
        get_engine(db_path)
        assert db_path.parent.is_dir()


class TestDbSessionContext:
    """Test the get_db_session context manager."""

    def test_commits_on_success(self, tmp_path):
        """Changes are committed on normal exit."""
        db_path = tmp_path / "vamos.db"
        init_db(db_path)

        with get_db_session(db_path) as session:
            repo.add_source(session, "yt1", is_video=True)

        session = get_session(db_path)
        try:
            assert [s.link for s in repo.list_all_sources(session)] == ["yt1"]
        finally:
            session.close()

    def test_rolls_back_on_error(self, tmp_path):
        """Changes are discarded when the block raises."""
        db_path = tmp_path / "vamos.db"
        init_db(db_path)

        with pytest.raises(RuntimeError):
            with get_db_session(db_path) as session:
                repo.add_source(session, "yt1", is_video=True)
                raise RuntimeError("boom")

        session = get_session(db_path)
        try:
            assert repo.list_all_sources(session) == []
        finally:
            session.close()
