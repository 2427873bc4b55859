"""In-memory video repository for testing."""

from typing import Optional

from dami.domain.model.video import Video
from dami.domain.repository.video import VideoRepository
from dami.domain.value import VideoId


class InMemoryVideoRepository(VideoRepository):
    """In-memory implementation of VideoRepository for testing."""

    def __init__(self) -> None:
        self._videos: dict[VideoId, Video] = {}

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        return self._videos.get(video_id)

    async def find_all(
        self,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[Video]:
        videos = list(self._videos.values())
        if category:
            videos = [v for v in videos if v.category == category]
        videos.sort(key=lambda v: v.created_at, reverse=True)
        return videos if limit is None else videos[:limit]

    async def count(self) -> int:
        return len(self._videos)

    async def list_categories(self) -> list[str]:
        videos = await self.find_all()
        return list(dict.fromkeys(v.category for v in videos))

    async def save(self, video: Video) -> Video:
        self._videos[video.id] = video
        return video

    async def delete(self, video_id: VideoId) -> bool:
        return self._videos.pop(video_id, None) is not None
