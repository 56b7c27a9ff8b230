"""Mix API endpoints.

GET /api/mix/sources - List the source catalog
GET /api/mix/random - Get a random audio/video mix
POST /api/mix/custom - Echo a client-chosen mix
"""

from __future__ import annotations

import logging
import random

from fastapi import APIRouter, Body, Depends, HTTPException

from vamos.api.app import get_db_session, get_rng
from vamos.db import repo
from vamos.db.repo import DbSession
from vamos.mix.selection import NoMixAvailable, get_random_mix
from vamos.models.types import CustomMixRequest, MixResult, SourceDetail

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sources", response_model=list[SourceDetail])
def list_sources(session: DbSession = Depends(get_db_session)) -> list[SourceDetail]:
    """List every source in the catalog.

    Args:
        session: Database session (injected).

    Returns:
        All sources as currently stored.
    """
    return [
        SourceDetail(
            id=s.id,
            link=s.link,
            title=s.title,
            artist=s.artist,
            is_video=s.is_video,
        )
        for s in repo.list_all_sources(session)
    ]


@router.get("/random", response_model=MixResult)
def random_mix(
    session: DbSession = Depends(get_db_session),
    rng: random.Random = Depends(get_rng),
) -> MixResult:
    """Pair a random catalog source with a random video source.

    Raises:
        HTTPException: 404 if the catalog or its video subset is empty.
    """
    try:
        mix = get_random_mix(session, rng)
    except NoMixAvailable as e:
        logger.debug(f"Random mix unavailable: {e}")
        raise HTTPException(status_code=404, detail=str(e)) from e

    return MixResult(audio_id=mix.audio_id, video_id=mix.video_id)


@router.post("/custom", response_model=MixResult)
def custom_mix(mix: CustomMixRequest | None = Body(default=None)) -> MixResult:
    """Validate a client-chosen mix and echo it back.

    No catalog lookup is performed.

    Raises:
        HTTPException: 400 if the body or either id is missing.
    """
    if mix is None or mix.audio_id is None or mix.video_id is None:
        raise HTTPException(status_code=400, detail="audioId and videoId are required")

    return MixResult(audio_id=mix.audio_id, video_id=mix.video_id)
