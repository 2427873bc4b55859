"""Get like status use case."""

from pydantic import BaseModel

from dami.application.usecase.base import SubjectUseCase, parse_subject
from dami.domain.service import ArticleService, LikeService, LikeStatus, VideoService
from dami.domain.value import ClientId, Subject, SubjectType


class LikeRequest(BaseModel):
    """Request naming a subject and the anonymous client acting on it."""

    subject_type: SubjectType
    subject_id: str  # UUID string
    client_id: str  # From the X-Client-Id header


class LikeStatusResponse(BaseModel):
    """Like state of a subject for one client."""

    subject_type: SubjectType
    subject_id: str
    liked: bool
    likes: int

    @classmethod
    def from_status(cls, subject: Subject, status: LikeStatus) -> "LikeStatusResponse":
        return cls(
            subject_type=subject.type,
            subject_id=str(subject.id),
            liked=status.liked,
            likes=status.likes,
        )


class GetLikeStatusUseCase(SubjectUseCase):
    """Use case for reading whether a client likes an article or video."""

    def __init__(
        self,
        like_service: LikeService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> None:
        super().__init__(article_service, video_service)
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        """Execute get like status flow.

        Raises:
            NotFoundError: If the subject does not exist
            ValueError: If the client id is blank
        """
        subject = parse_subject(request.subject_type, request.subject_id)
        await self.ensure_subject_exists(subject)
        status = await self.like_service.get_like_status(
            subject, ClientId(request.client_id)
        )
        return LikeStatusResponse.from_status(subject, status)
