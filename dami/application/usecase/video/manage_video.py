"""Admin video create, update and delete use cases."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from dami.application.usecase.base import BaseUseCase
from dami.domain.error import NotFoundError
from dami.domain.service import VideoService
from dami.domain.value import VideoId

from .common import VideoResponse


class VideoFields(BaseModel):
    """Editable video fields, as submitted by the admin form."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    youtube_url: str = Field(min_length=1)  # watch, youtu.be or embed link
    category: str
    thumbnail: str | None = None  # Defaults to the YouTube thumbnail
    duration: str | None = None
    views: str | None = None
    publish_date: date | None = None


class VideoChanges(BaseModel):
    """Partial video update; omitted fields stay unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = Field(default=None, min_length=1)
    youtube_url: str | None = None
    category: str | None = None
    thumbnail: str | None = None
    duration: str | None = None
    views: str | None = None
    publish_date: date | None = None


class UpdateVideoRequest(BaseModel):
    video_id: str
    changes: VideoChanges


class DeleteVideoRequest(BaseModel):
    video_id: str


def _video_id(raw: str) -> VideoId:
    try:
        return VideoId(UUID(raw))
    except ValueError:
        raise NotFoundError("Video", raw)


class CreateVideoUseCase(BaseUseCase):
    """Use case for adding a YouTube video to the catalog."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: VideoFields) -> VideoResponse:
        """Create the video.

        Raises:
            ValidationError: If the YouTube link or category is invalid
        """
        video = await self.video_service.create_video(**request.model_dump())
        return VideoResponse.from_domain(video)


class UpdateVideoUseCase(BaseUseCase):
    """Use case for editing a video."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: UpdateVideoRequest) -> VideoResponse:
        video = await self.video_service.update_video(
            _video_id(request.video_id),
            **request.changes.model_dump(exclude_unset=True),
        )
        return VideoResponse.from_domain(video)


class DeleteVideoUseCase(BaseUseCase):
    """Use case for deleting a video along with its comments and likes."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: DeleteVideoRequest) -> None:
        await self.video_service.delete_video(_video_id(request.video_id))
