"""Video use cases."""

from .common import VideoResponse
from .get_video import GetVideoRequest, GetVideoUseCase
from .list_videos import (
    ListVideoCategoriesUseCase,
    ListVideosRequest,
    ListVideosResponse,
    ListVideosUseCase,
)
from .manage_video import (
    CreateVideoUseCase,
    DeleteVideoRequest,
    DeleteVideoUseCase,
    UpdateVideoRequest,
    UpdateVideoUseCase,
    VideoChanges,
    VideoFields,
)

__all__ = [
    "CreateVideoUseCase",
    "DeleteVideoRequest",
    "DeleteVideoUseCase",
    "GetVideoRequest",
    "GetVideoUseCase",
    "ListVideoCategoriesUseCase",
    "ListVideosRequest",
    "ListVideosResponse",
    "ListVideosUseCase",
    "UpdateVideoRequest",
    "UpdateVideoUseCase",
    "VideoChanges",
    "VideoFields",
    "VideoResponse",
]
