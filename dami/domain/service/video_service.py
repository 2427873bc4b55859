"""Video domain service."""

from datetime import date
from uuid import uuid4

import logfire

from dami.domain.error import NotFoundError, ValidationError
from dami.domain.model.common import utc_now
from dami.domain.model.video import VIDEO_CATEGORIES, Video
from dami.domain.repository import VideoRepository
from dami.domain.value import VideoId, YoutubeId

from .base import Service

ALL_CATEGORIES = "All"
FEATURED_LIMIT = 3
INVALID_YOUTUBE_URL = "Invalid YouTube URL. Please enter a valid YouTube video link."


def parse_youtube_url(url: str) -> YoutubeId:
    """Extract the video id from a YouTube link.

    Raises:
        ValidationError: If the link is not a recognised YouTube link
    """
    youtube_id = YoutubeId.from_url(url)
    if youtube_id is None:
        raise ValidationError(INVALID_YOUTUBE_URL)
    return youtube_id


class VideoService(Service):
    """Domain service for video operations."""

    def __init__(self, video_repository: VideoRepository) -> None:
        """Initialize video service.

        Args:
            video_repository: Video repository
        """
        self.video_repository = video_repository

    async def list_videos(
        self, category: str | None = None, limit: int | None = None
    ) -> list[Video]:
        """List videos newest first ("All" or None means every category)."""
        if category == ALL_CATEGORIES:
            category = None
        with logfire.span("video_service.list_videos", category=category, limit=limit):
            videos = await self.video_repository.find_all(category=category, limit=limit)
            logfire.info("Videos retrieved", count=len(videos), category=category)
            return videos

    async def get_featured(self) -> list[Video]:
        return await self.list_videos(limit=FEATURED_LIMIT)

    async def get_video(self, video_id: VideoId) -> Video | None:
        """Get a video by ID.

        Args:
            video_id: Video ID

        Returns:
            Video if found, None otherwise
        """
        with logfire.span("video_service.get_video", video_id=str(video_id)):
            video = await self.video_repository.find_by_id(video_id)
            if not video:
                logfire.warn("Video not found", video_id=str(video_id))
            return video

    async def list_categories(self) -> list[str]:
        categories = await self.video_repository.list_categories()
        return [ALL_CATEGORIES, *categories]

    async def count_videos(self) -> int:
        return await self.video_repository.count()

    async def create_video(
        self,
        title: str,
        description: str,
        youtube_url: str,
        category: str,
        thumbnail: str | None = None,
        duration: str | None = None,
        views: str | None = None,
        publish_date: date | None = None,
    ) -> Video:
        """Create a video from a YouTube link.

        Args:
            title: Video title
            description: Video description
            youtube_url: watch, youtu.be or embed link
            category: One of the admin categories
            thumbnail: Thumbnail URL (defaults to the YouTube max-res thumbnail)
            duration: Display duration such as "12:34"
            views: Display view count
            publish_date: Publication date (defaults to today)

        Returns:
            Created video

        Raises:
            ValidationError: If the link or category is invalid
        """
        with logfire.span("video_service.create_video", title=title):
            youtube_id = parse_youtube_url(youtube_url)
            self._check_category(category)

            fields = {
                "title": title.strip(),
                "description": description.strip(),
                "youtube_id": youtube_id,
                "category": category,
                "thumbnail": (thumbnail or "").strip() or youtube_id.thumbnail_url,
            }
            if duration:
                fields["duration"] = duration
            if views:
                fields["views"] = views
            if publish_date:
                fields["publish_date"] = publish_date

            video = Video(id=VideoId(uuid4()), **fields)
            saved = await self.video_repository.save(video)
            logfire.info(
                "Video created",
                video_id=str(saved.id),
                youtube_id=str(saved.youtube_id),
            )
            return saved

    async def update_video(
        self, video_id: VideoId, youtube_url: str | None = None, **changes
    ) -> Video:
        """Update a video.

        Args:
            video_id: Video ID
            youtube_url: New YouTube link (optional)
            **changes: Other fields to change (None values are ignored)

        Returns:
            Updated video

        Raises:
            NotFoundError: If the video does not exist
            ValidationError: If the link or category is invalid
        """
        with logfire.span("video_service.update_video", video_id=str(video_id)):
            video = await self.video_repository.find_by_id(video_id)
            if not video:
                logfire.warn("Video not found for update", video_id=str(video_id))
                raise NotFoundError("Video", str(video_id))

            changes = {key: value for key, value in changes.items() if value is not None}
            if youtube_url:
                changes["youtube_id"] = parse_youtube_url(youtube_url)
            if "category" in changes:
                self._check_category(changes["category"])

            updated = Video.model_validate(
                {**video.model_dump(), **changes, "updated_at": utc_now()}
            )
            saved = await self.video_repository.save(updated)
            logfire.info(
                "Video updated", video_id=str(video_id), fields=sorted(changes)
            )
            return saved

    async def delete_video(self, video_id: VideoId) -> None:
        """Delete a video.

        Raises:
            NotFoundError: If the video does not exist
        """
        with logfire.span("video_service.delete_video", video_id=str(video_id)):
            deleted = await self.video_repository.delete(video_id)
            if not deleted:
                logfire.warn("Video not found for delete", video_id=str(video_id))
                raise NotFoundError("Video", str(video_id))
            logfire.info("Video deleted", video_id=str(video_id))

    @staticmethod
    def _check_category(category: str) -> None:
        if category not in VIDEO_CATEGORIES:
            raise ValidationError(f"Unknown video category: {category}")
