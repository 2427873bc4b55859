"""Like routes.

Likes are anonymous: the browser identifies itself with the X-Client-Id
header on every call.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from dami.application.usecase.like import (
    GetLikeStatusUseCase,
    LikeRequest,
    LikeStatusResponse,
    ToggleLikeUseCase,
    UnlikeUseCase,
)
from dami.domain.value import new_client_id
from dami.interface.api.subject import SubjectPath
from dami.interface.error import BadRequestError

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


class ClientIdResponse(BaseModel):
    client_id: str


def _like_request(kind: SubjectPath, subject_id: str, client_id: str | None) -> LikeRequest:
    if not client_id or not client_id.strip():
        raise BadRequestError("X-Client-Id header is required")
    return LikeRequest(
        subject_type=kind.subject_type, subject_id=subject_id, client_id=client_id
    )


@router.get("/client-id", response_model=ClientIdResponse)
async def issue_client_id() -> ClientIdResponse:
    """Issue a fresh anonymous client id for browsers that have none."""
    return ClientIdResponse(client_id=str(new_client_id()))


@router.get("/{kind}/{subject_id}/like", response_model=LikeStatusResponse)
async def get_like_status(
    kind: SubjectPath,
    subject_id: str,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    x_client_id: str | None = Header(default=None),
) -> LikeStatusResponse:
    """Whether this client likes the article or video, and the like total."""
    return await get_like_status_use_case.execute(
        _like_request(kind, subject_id, x_client_id)
    )


@router.post("/{kind}/{subject_id}/like", response_model=LikeStatusResponse)
async def toggle_like(
    kind: SubjectPath,
    subject_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    x_client_id: str | None = Header(default=None),
) -> LikeStatusResponse:
    """Toggle this client's like and return the new status."""
    return await toggle_like_use_case.execute(
        _like_request(kind, subject_id, x_client_id)
    )


@router.delete("/{kind}/{subject_id}/like", response_model=LikeStatusResponse)
async def unlike(
    kind: SubjectPath,
    subject_id: str,
    unlike_use_case: FromDishka[UnlikeUseCase],
    x_client_id: str | None = Header(default=None),
) -> LikeStatusResponse:
    """Remove this client's like (no-op if it had not liked)."""
    return await unlike_use_case.execute(_like_request(kind, subject_id, x_client_id))
