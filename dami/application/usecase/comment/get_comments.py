"""Get comments use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from dami.application.formatting import format_datetime
from dami.application.usecase.base import SubjectUseCase, parse_subject
from dami.config import CommentSettings
from dami.domain.model import CommentNode
from dami.domain.service import (
    ArticleService,
    CommentService,
    VideoService,
    count_nodes,
)
from dami.domain.value import CommentId, SubjectType


class CommentNodeResponse(BaseModel):
    """One comment and its nested replies."""

    comment_id: str
    parent_id: str | None
    author_label: str
    body: str
    created_at: datetime
    created_at_display: str
    depth: int
    reply_count: int | None  # None once the thread is too deep to show it
    replies: list["CommentNodeResponse"]

    @classmethod
    def from_tree(
        cls, roots: list[CommentNode], max_depth: int
    ) -> list["CommentNodeResponse"]:
        """Render a reply tree without recursing, so chain length is unbounded."""
        ordered: list[tuple[CommentNode, int]] = []
        pending = [(root, 0) for root in reversed(roots)]
        while pending:
            node, depth = pending.pop()
            ordered.append((node, depth))
            pending.extend((reply, depth + 1) for reply in reversed(node.replies))

        # Pre-order reversed: every reply is rendered before its parent
        rendered: dict[CommentId, CommentNodeResponse] = {}
        for node, depth in reversed(ordered):
            comment = node.comment
            rendered[node.id] = cls(
                comment_id=str(comment.id),
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                author_label=comment.author_label,
                body=comment.body,
                created_at=comment.created_at,
                created_at_display=format_datetime(comment.created_at),
                depth=depth,
                reply_count=len(node.replies) if depth < max_depth else None,
                replies=[rendered.pop(reply.id) for reply in node.replies],
            )
        return [rendered.pop(root.id) for root in roots]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    subject_type: SubjectType
    subject_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    subject_type: SubjectType
    subject_id: str
    comments: list[CommentNodeResponse]
    total: int
    root_count: int
    degraded: bool = False  # True when the store could not be read


class GetCommentsUseCase(SubjectUseCase):
    """Use case for getting the comment thread of an article or video."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        video_service: VideoService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            article_service: Article service (subject lookup)
            video_service: Video service (subject lookup)
            comment_settings: Comment section settings
        """
        super().__init__(article_service, video_service)
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        The tree is rebuilt from the flat rows on every call. If reading or
        rendering the comments fails, the error is logged and an empty thread
        marked as degraded is returned instead of failing the page.

        Args:
            request: Get comments request with subject kind and id

        Returns:
            Nested comment thread

        Raises:
            NotFoundError: If the article or video does not exist
        """
        subject = parse_subject(request.subject_type, request.subject_id)
        await self.ensure_subject_exists(subject)

        max_depth = self.comment_settings.reply_count_max_depth
        try:
            roots = await self.comment_service.get_comment_tree(subject)
            comments = CommentNodeResponse.from_tree(roots, max_depth)
            total, root_count, degraded = count_nodes(roots), len(roots), False
        except Exception as e:
            logfire.error(
                "Failed to load comments", subject=str(subject), error=str(e)
            )
            comments, total, root_count, degraded = [], 0, 0, True

        return GetCommentsResponse(
            subject_type=subject.type,
            subject_id=str(subject.id),
            comments=comments,
            total=total,
            root_count=root_count,
            degraded=degraded,
        )
