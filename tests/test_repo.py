"""Tests for the source repository."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from vamos.db import repo
from vamos.db.repo import StoreUnavailable
from vamos.models.domain import SourceEntity


def seed(session) -> None:
    repo.add_source(session, "yt1", title="A", artist="X", is_video=False)
    repo.add_source(session, "yt2", title="B", artist="Y", is_video=True)
    repo.add_source(session, "yt3", title=None, artist=None, is_video=True)
    repo.commit(session)


class TestListAllSources:
    """Test list_all_sources."""

    def test_empty_catalog(self, session):
        """Empty catalog yields an empty list."""
        assert repo.list_all_sources(session) == []

    def test_returns_every_source(self, session):
        """All stored sources come back as domain entities."""
        seed(session)

        sources = repo.list_all_sources(session)

        assert len(sources) == 3
        assert all(isinstance(s, SourceEntity) for s in sources)
        assert {s.link for s in sources} == {"yt1", "yt2", "yt3"}

    def test_fields_intact(self, session):
        """Stored fields are returned unchanged."""
        seed(session)

        by_link = {s.link: s for s in repo.list_all_sources(session)}

        assert by_link["yt1"].title == "A"
        assert by_link["yt1"].artist == "X"
        assert by_link["yt1"].is_video is False
        assert by_link["yt3"].title is None


class TestListByVideoFlag:
    """Test list_sources_by_video_flag."""

    def test_video_subset(self, session):
        """True returns only video-flagged sources."""
        seed(session)

        sources = repo.list_sources_by_video_flag(session, True)

        assert {s.link for s in sources} == {"yt2", "yt3"}
        assert all(s.is_video for s in sources)

    def test_audio_only_subset(self, session):
        """False returns only audio-only sources."""
        seed(session)

        sources = repo.list_sources_by_video_flag(session, False)

        assert [s.link for s in sources] == ["yt1"]


class TestAddSource:
    """Test add_source and get_source_by_link."""

    def test_assigns_id(self, session):
        """Store assigns a distinct id to each source."""
        first = repo.add_source(session, "yt1", is_video=False)
        second = repo.add_source(session, "yt2", is_video=True)

        assert first.id is not None
        assert second.id != first.id

    def test_get_by_link(self, session):
        """Lookup by link finds the stored source."""
        seed(session)

        source = repo.get_source_by_link(session, "yt2")

        assert source is not None
        assert source.title == "B"

    def test_get_by_unknown_link(self, session):
        """Unknown link returns None."""
        assert repo.get_source_by_link(session, "missing") is None


class TestStoreUnavailable:
    """Query failures surface as StoreUnavailable."""

    def test_missing_table_raises(self):
        """A database without the schema cannot be queried."""
        engine = create_engine("sqlite:///:memory:")
        with Session(engine) as session:
            with pytest.raises(StoreUnavailable):
                repo.list_all_sources(session)

    def test_filtered_query_raises(self):
        """The filtered listing wraps failures too."""
        engine = create_engine("sqlite:///:memory:")
        with Session(engine) as session:
            with pytest.raises(StoreUnavailable):
                repo.list_sources_by_video_flag(session, True)
