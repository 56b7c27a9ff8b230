"""Catalog import.

Loads source entries from a JSON array and inserts the ones whose link
is not in the catalog yet. Existing sources are never modified.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from vamos.db import repo
from vamos.db.repo import DbSession

logger = logging.getLogger(__name__)


class CatalogEntry(BaseModel):
    """One source entry in a catalog file."""

    model_config = ConfigDict(populate_by_name=True)

    link: str = Field(min_length=1)
    title: str | None = None
    artist: str | None = None
    is_video: bool = Field(alias="isVideo")


@dataclass
class SeedResult:
    """Result of a catalog import."""

    added: int
    skipped: int


def load_catalog(path: Path) -> list[CatalogEntry]:
    """Read and validate a catalog JSON file.

    Raises:
        pydantic.ValidationError: If an entry is malformed.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return TypeAdapter(list[CatalogEntry]).validate_python(data)


def seed_sources(session: DbSession, entries: list[CatalogEntry]) -> SeedResult:
    """Insert entries with unseen links. Caller commits.

    Each added source is flushed, so a link repeated within ``entries``
    is inserted once.
    """
    added = 0
    skipped = 0

    for entry in entries:
        if repo.get_source_by_link(session, entry.link):
            logger.debug(f"Skipping existing source {entry.link}")
            skipped += 1
            continue

        repo.add_source(
            session,
            entry.link,
            title=entry.title,
            artist=entry.artist,
            is_video=entry.is_video,
        )
        added += 1

    logger.info(f"Catalog import: {added} added, {skipped} skipped")
    return SeedResult(added=added, skipped=skipped)
