"""List videos use case."""

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.service import VideoService

from .common import VideoResponse


class ListVideosRequest(BaseModel):
    """List videos request."""

    category: str | None = None  # "All" or None for every category
    featured: bool = False


class ListVideosResponse(BaseModel):
    """List videos response."""

    videos: list[VideoResponse]
    total: int


class ListVideosUseCase(BaseUseCase):
    """Use case for listing videos, newest first."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: ListVideosRequest) -> ListVideosResponse:
        if request.featured:
            videos = await self.video_service.get_featured()
        else:
            videos = await self.video_service.list_videos(category=request.category)
        items = [VideoResponse.from_domain(video) for video in videos]
        return ListVideosResponse(videos=items, total=len(items))


class ListVideoCategoriesUseCase(BaseUseCase):
    """Use case for the video category filter."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: None = None) -> list[str]:
        return await self.video_service.list_categories()
