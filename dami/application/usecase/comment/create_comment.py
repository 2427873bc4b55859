"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from dami.application.usecase.base import SubjectUseCase, parse_subject
from dami.domain.service import ArticleService, CommentService, VideoService
from dami.domain.value import CommentId, SubjectType


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    subject_type: SubjectType
    subject_id: str  # UUID string
    body: str = Field(max_length=10000)
    author_name: str | None = Field(default=None, max_length=100)
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    subject_type: SubjectType
    subject_id: str
    parent_id: str | None
    author_label: str
    body: str
    approved: bool
    created_at: datetime


class CreateCommentUseCase(SubjectUseCase):
    """Use case for commenting on an article or video, or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article service (subject lookup)
            video_service: Video service (subject lookup)
        """
        super().__init__(article_service, video_service)
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the article or video exists
        2. Create the comment (service validates body and parent)

        Callers refetch the thread afterwards; nothing is patched in place.

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            NotFoundError: If the subject does not exist
            ValidationError: If the body is empty
            ValueError: If the parent comment is invalid
        """
        subject = parse_subject(request.subject_type, request.subject_id)
        await self.ensure_subject_exists(subject)

        try:
            parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        except ValueError:
            raise ValueError("Parent comment not found")

        comment = await self.comment_service.create_comment(
            subject=subject,
            body=request.body,
            author_name=request.author_name,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            subject_type=subject.type,
            subject_id=str(subject.id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_label=comment.author_label,
            body=comment.body,
            approved=comment.approved,
            created_at=comment.created_at,
        )
