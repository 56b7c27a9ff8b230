"""Domain models for VAMOS.

Plain dataclasses, independent of SQLAlchemy, passed between the
repository, the mix selector and the API layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceEntity:
    """Domain model for a catalog source."""

    id: int
    link: str
    is_video: bool
    title: str | None = None
    artist: str | None = None


@dataclass(frozen=True)
class MixEntity:
    """An audio link paired with a video link.

    Both fields hold the ``link`` of a catalog source, not its numeric id.
    """

    audio_id: str
    video_id: str
