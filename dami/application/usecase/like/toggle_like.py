"""Toggle like use case."""

from dami.application.usecase.base import SubjectUseCase, parse_subject
from dami.domain.service import ArticleService, LikeService, VideoService
from dami.domain.value import ClientId

from .get_like_status import LikeRequest, LikeStatusResponse


class ToggleLikeUseCase(SubjectUseCase):
    """Use case for the like button: like if not liked yet, otherwise unlike."""

    def __init__(
        self,
        like_service: LikeService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
            article_service: Article service (subject lookup)
            video_service: Video service (subject lookup)
        """
        super().__init__(article_service, video_service)
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        """Execute toggle like flow.

        Args:
            request: Subject and client id

        Returns:
            The like status after the toggle

        Raises:
            NotFoundError: If the subject does not exist
            ValueError: If the client id is blank
        """
        subject = parse_subject(request.subject_type, request.subject_id)
        await self.ensure_subject_exists(subject)
        status = await self.like_service.toggle_like(
            subject, ClientId(request.client_id)
        )
        return LikeStatusResponse.from_status(subject, status)
