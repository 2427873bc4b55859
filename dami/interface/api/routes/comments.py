"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from dami.application.usecase.admin import GetCurrentAdminUseCase
from dami.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from dami.config import Settings
from dami.interface.api.auth import require_admin
from dami.interface.api.subject import SubjectPath

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str = Field(max_length=10000)
    author_name: str | None = Field(default=None, max_length=100)
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{kind}/{subject_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    kind: SubjectPath,
    subject_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the comment thread of an article or video.

    Top-level comments come newest first, replies oldest first at every
    depth. A store failure yields an empty thread with degraded=true.

    Args:
        kind: "articles" or "videos"
        subject_id: Article or video UUID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Nested comment thread
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(subject_type=kind.subject_type, subject_id=subject_id)
    )


@router.post(
    "/{kind}/{subject_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    kind: SubjectPath,
    subject_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on an article or video, or reply to a comment.

    No account is needed; author_name is optional.

    Raises:
        NotFoundError: If the article or video does not exist (404)
        ValidationError: If the body is empty (400)
        ValueError: If the parent comment is invalid (400)
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            subject_type=kind.subject_type,
            subject_id=subject_id,
            body=request.body,
            author_name=request.author_name,
            parent_id=request.parent_id,
        )
    )


@router.delete(
    "/admin/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_comment(
    request: Request,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> Response:
    """Remove a comment (admin only). Its replies become top-level comments."""
    await require_admin(request, get_current_admin_use_case, settings)
    await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=comment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
