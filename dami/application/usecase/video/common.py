"""Video response model."""

from datetime import date, datetime

from pydantic import BaseModel

from dami.application.formatting import format_date
from dami.domain.model import Video


class VideoResponse(BaseModel):
    """Video as shown in the catalog and the player page."""

    video_id: str
    title: str
    description: str
    youtube_id: str
    embed_url: str
    category: str
    thumbnail: str
    duration: str
    views: str
    publish_date: date
    publish_date_display: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, video: Video) -> "VideoResponse":
        return cls(
            video_id=str(video.id),
            title=video.title,
            description=video.description,
            youtube_id=str(video.youtube_id),
            embed_url=video.embed_url,
            category=video.category,
            thumbnail=video.thumbnail,
            duration=video.duration,
            views=video.views,
            publish_date=video.publish_date,
            publish_date_display=format_date(video.publish_date),
            created_at=video.created_at,
            updated_at=video.updated_at,
        )
