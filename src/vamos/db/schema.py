"""Database schema for VAMOS.

One table, ``sources``, holding the media catalog. The unique constraint
on ``link`` enforces that each external reference appears once.
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Source(Base):
    """Catalog entry referencing an audio track, optionally with a video clip.

    Invariant: UNIQUE(link), link and is_video never null.
    Ids are autoincremented and never reused.
    """

    __tablename__ = "sources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    link: Mapped[str] = mapped_column(String(512), unique=True, nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_video: Mapped[bool] = mapped_column(Boolean, nullable=False)

    __table_args__ = {"sqlite_autoincrement": True}
