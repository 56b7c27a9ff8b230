"""Random mix selection.

Pairs one audio source drawn from the whole catalog with one video
source drawn from the video-flagged subset.

Selection is pure - database reads go through repo.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from vamos.db import repo
from vamos.db.repo import DbSession
from vamos.models.domain import MixEntity, SourceEntity

logger = logging.getLogger(__name__)


class NoMixAvailable(ValueError):
    """The catalog or its video-flagged subset is empty."""


def select_random_mix(
    all_sources: Sequence[SourceEntity],
    video_sources: Sequence[SourceEntity],
    rng: random.Random | None = None,
) -> MixEntity:
    """Pick a random audio source and a random video source.

    The audio pick is drawn from the entire catalog, video-flagged
    entries included. The two draws are independent and uniform.

    Args:
        all_sources: Whole catalog.
        video_sources: Sources with is_video set.
        rng: Random source. A fresh unseeded generator when omitted.

    Returns:
        MixEntity holding the links of both picks.

    Raises:
        NoMixAvailable: If either sequence is empty.
    """
    if not all_sources or not video_sources:
        raise NoMixAvailable("No mix found")

    if rng is None:
        rng = random.Random()

    audio = all_sources[rng.randrange(len(all_sources))]
    video = video_sources[rng.randrange(len(video_sources))]

    return MixEntity(audio_id=audio.link, video_id=video.link)


def get_random_mix(session: DbSession, rng: random.Random | None = None) -> MixEntity:
    """Select a random mix from the catalog.

    Reads the catalog and the video subset as two separate queries; a
    source added in between may show up in only one of them.

    Raises:
        NoMixAvailable: If the catalog or its video subset is empty.
        StoreUnavailable: If the catalog cannot be read.
    """
    all_sources = repo.list_all_sources(session)
    video_sources = repo.list_sources_by_video_flag(session, True)

    mix = select_random_mix(all_sources, video_sources, rng)
    logger.debug(f"Selected mix audio={mix.audio_id} video={mix.video_id}")
    return mix
