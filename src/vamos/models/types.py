"""Pydantic models for the VAMOS API.

JSON field names are camelCase to match the mixer frontend; Python
attribute names stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing fields under camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SourceDetail(CamelModel):
    """Catalog source for API response."""

    id: int
    link: str
    title: str | None
    artist: str | None
    is_video: bool

    @computed_field(alias="youtubeLink")  # type: ignore[prop-decorator]
    @property
    def youtube_link(self) -> str:
        """Same value as ``link``, under the name the frontend reads."""
        return self.link


class MixResult(CamelModel):
    """Audio/video pairing returned to the client."""

    audio_id: str
    video_id: str


class CustomMixRequest(BaseModel):
    """Client-chosen pairing.

    Fields are optional at the schema level so that a missing or null
    value is answered with 400 by the route rather than a 422. Only the
    camelCase keys are read; numeric ids are taken as strings.
    """

    model_config = ConfigDict(alias_generator=to_camel, coerce_numbers_to_str=True)

    audio_id: str | None = None
    video_id: str | None = None
