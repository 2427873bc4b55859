"""Video repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from dami.domain.model.video import Video
from dami.domain.value import VideoId


class VideoRepository(ABC):
    """Repository for Video entity.

    Defines the contract for video persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Video]:
        """Find videos, newest first (by created_at).

        Args:
            category: Only return videos in this category
            limit: Maximum number of videos to return (None for all)

        Returns:
            List of videos
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all videos."""
        pass

    @abstractmethod
    async def list_categories(self) -> List[str]:
        """Distinct categories in newest-first order of first appearance."""
        pass

    @abstractmethod
    async def save(self, video: Video) -> Video:
        """Save a video (create or update)."""
        pass

    @abstractmethod
    async def delete(self, video_id: VideoId) -> bool:
        """Delete a video.

        Returns:
            True if a video was deleted, False if none existed
        """
        pass
