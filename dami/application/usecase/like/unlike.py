"""Unlike use case."""

from dami.application.usecase.base import SubjectUseCase, parse_subject
from dami.domain.service import ArticleService, LikeService, VideoService
from dami.domain.value import ClientId

from .get_like_status import LikeRequest, LikeStatusResponse


class UnlikeUseCase(SubjectUseCase):
    """Use case for removing a client's like. Removing a missing like is a no-op."""

    def __init__(
        self,
        like_service: LikeService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> None:
        super().__init__(article_service, video_service)
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        subject = parse_subject(request.subject_type, request.subject_id)
        await self.ensure_subject_exists(subject)
        client_id = ClientId(request.client_id)
        await self.like_service.unlike(subject, client_id)
        status = await self.like_service.get_like_status(subject, client_id)
        return LikeStatusResponse.from_status(subject, status)
