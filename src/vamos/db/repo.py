"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping mix selection pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vamos.db.schema import Source
from vamos.models.domain import SourceEntity

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

__all__ = ["DbSession", "StoreUnavailable"]


class StoreUnavailable(Exception):
    """The source catalog could not be reached or queried."""


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _source_to_entity(source: Source) -> SourceEntity:
    """Convert SQLAlchemy Source to domain entity."""
    return SourceEntity(
        id=source.id,
        link=source.link,
        title=source.title,
        artist=source.artist,
        is_video=source.is_video,
    )


# ============================================================================
# Source Repository
# ============================================================================


def list_all_sources(session: DbSession) -> list[SourceEntity]:
    """Get every source in the catalog.

    Raises:
        StoreUnavailable: If the query fails.
    """
    try:
        sources = session.query(Source).order_by(Source.id).all()
    except SQLAlchemyError as e:
        raise StoreUnavailable("Source store unavailable") from e
    return [_source_to_entity(s) for s in sources]


def list_sources_by_video_flag(session: DbSession, is_video: bool) -> list[SourceEntity]:
    """Get sources whose is_video flag equals the given value.

    Raises:
        StoreUnavailable: If the query fails.
    """
    try:
        sources = (
            session.query(Source)
            .filter(Source.is_video == is_video)
            .order_by(Source.id)
            .all()
        )
    except SQLAlchemyError as e:
        raise StoreUnavailable("Source store unavailable") from e
    return [_source_to_entity(s) for s in sources]


def get_source_by_link(session: DbSession, link: str) -> SourceEntity | None:
    """Get source by its external link."""
    source = session.query(Source).filter(Source.link == link).first()
    return _source_to_entity(source) if source else None


def add_source(
    session: DbSession,
    link: str,
    *,
    title: str | None = None,
    artist: str | None = None,
    is_video: bool = False,
) -> SourceEntity:
    """Add a source to the catalog. Caller commits.

    Flushes so the store-assigned id is available on the returned entity.
    """
    source = Source(link=link, title=title, artist=artist, is_video=is_video)
    session.add(source)
    session.flush()
    return _source_to_entity(source)


def commit(session: DbSession) -> None:
    """Commit current transaction."""
    session.commit()
