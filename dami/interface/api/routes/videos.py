"""Video routes: public catalog and admin management."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status

from dami.application.usecase.admin import GetCurrentAdminUseCase
from dami.application.usecase.video import (
    CreateVideoUseCase,
    DeleteVideoRequest,
    DeleteVideoUseCase,
    GetVideoRequest,
    GetVideoUseCase,
    ListVideoCategoriesUseCase,
    ListVideosRequest,
    ListVideosResponse,
    ListVideosUseCase,
    UpdateVideoRequest,
    UpdateVideoUseCase,
    VideoChanges,
    VideoFields,
    VideoResponse,
)
from dami.config import Settings
from dami.interface.api.auth import require_admin

router = APIRouter(prefix="/videos", tags=["videos"], route_class=DishkaRoute)
admin_router = APIRouter(prefix="/admin/videos", tags=["admin"], route_class=DishkaRoute)


@router.get("", response_model=ListVideosResponse)
async def list_videos(
    list_videos_use_case: FromDishka[ListVideosUseCase],
    category: str | None = None,
) -> ListVideosResponse:
    """List videos, newest first ("All" means no category filter)."""
    return await list_videos_use_case.execute(ListVideosRequest(category=category))


@router.get("/featured", response_model=ListVideosResponse)
async def featured_videos(
    list_videos_use_case: FromDishka[ListVideosUseCase],
) -> ListVideosResponse:
    return await list_videos_use_case.execute(ListVideosRequest(featured=True))


@router.get("/categories", response_model=list[str])
async def video_categories(
    list_categories_use_case: FromDishka[ListVideoCategoriesUseCase],
) -> list[str]:
    return await list_categories_use_case.execute()


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: str,
    get_video_use_case: FromDishka[GetVideoUseCase],
) -> VideoResponse:
    """Read a video, including its embed URL."""
    return await get_video_use_case.execute(GetVideoRequest(video_id=video_id))


@admin_router.get("", response_model=ListVideosResponse)
async def admin_list_videos(
    request: Request,
    list_videos_use_case: FromDishka[ListVideosUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> ListVideosResponse:
    await require_admin(request, get_current_admin_use_case, settings)
    return await list_videos_use_case.execute(ListVideosRequest())


@admin_router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def create_video(
    request: Request,
    fields: VideoFields,
    create_video_use_case: FromDishka[CreateVideoUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> VideoResponse:
    """Add a video from a YouTube link.

    Raises:
        ValidationError: If the link is not a YouTube video link (400)
    """
    await require_admin(request, get_current_admin_use_case, settings)
    return await create_video_use_case.execute(fields)


@admin_router.put("/{video_id}", response_model=VideoResponse)
async def update_video(
    request: Request,
    video_id: str,
    changes: VideoChanges,
    update_video_use_case: FromDishka[UpdateVideoUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> VideoResponse:
    await require_admin(request, get_current_admin_use_case, settings)
    return await update_video_use_case.execute(
        UpdateVideoRequest(video_id=video_id, changes=changes)
    )


@admin_router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    request: Request,
    video_id: str,
    delete_video_use_case: FromDishka[DeleteVideoUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> Response:
    await require_admin(request, get_current_admin_use_case, settings)
    await delete_video_use_case.execute(DeleteVideoRequest(video_id=video_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
