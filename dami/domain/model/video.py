"""Video entity.

Videos are YouTube uploads listed in the catalog and played through the
embed player.
"""

from datetime import date, datetime

from pydantic import Field

from dami.domain.model.common import DomainModel, utc_now
from dami.domain.value import VideoId, YoutubeId

VIDEO_CATEGORIES = (
    "Tutorial",
    "Review",
    "Guide",
    "News",
    "Interview",
    "Documentary",
)


class Video(DomainModel):
    """Video entity.

    views is kept as free text (e.g. "12K") because that is how the
    catalog has always stored it.
    """

    id: VideoId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    youtube_id: YoutubeId
    category: str = Field(min_length=1, max_length=50)
    thumbnail: str = Field(min_length=1)
    duration: str = Field(default="", max_length=20)
    views: str = Field(default="0", max_length=20)
    publish_date: date = Field(default_factory=lambda: utc_now().date())
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def embed_url(self) -> str:
        return self.youtube_id.embed_url
