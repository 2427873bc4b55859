"""Get video use case."""

from uuid import UUID

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.error import NotFoundError
from dami.domain.service import VideoService
from dami.domain.value import VideoId

from .common import VideoResponse


class GetVideoRequest(BaseModel):
    video_id: str  # UUID string


class GetVideoUseCase(BaseUseCase):
    """Use case for reading one video."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: GetVideoRequest) -> VideoResponse:
        """Execute get video flow.

        Raises:
            NotFoundError: If the video does not exist
        """
        try:
            video_id = VideoId(UUID(request.video_id))
        except ValueError:
            raise NotFoundError("Video", request.video_id)

        video = await self.video_service.get_video(video_id)
        if not video:
            raise NotFoundError("Video", request.video_id)
        return VideoResponse.from_domain(video)
