"""Comment domain service."""

from uuid import uuid4

import logfire

from dami.config import CommentSettings
from dami.domain.error import NotFoundError, ValidationError
from dami.domain.model.comment import Comment, CommentNode
from dami.domain.repository import CommentRepository
from dami.domain.value import CommentId, Subject

from .base import Service
from .comment_tree import build_comment_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment section settings (approval policy)
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings

    async def create_comment(
        self,
        subject: Subject,
        body: str,
        author_name: str | None = None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a subject or a reply to another comment.

        Args:
            subject: Article or video being commented on
            body: Comment text (trimmed, must not be empty)
            author_name: Optional display name (blank is stored as None)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the body is empty
            ValueError: If the parent comment is missing or on another subject
        """
        with logfire.span(
            "comment_service.create_comment",
            subject=str(subject),
            parent_id=str(parent_id) if parent_id else None,
        ):
            body = body.strip()
            if not body:
                raise ValidationError("Comment body cannot be empty")
            author_name = (author_name or "").strip() or None

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        subject=str(subject),
                    )
                    raise ValueError("Parent comment not found")
                if parent.subject != subject:
                    logfire.error(
                        "Parent comment belongs to another subject",
                        parent_id=str(parent_id),
                        parent_subject=str(parent.subject),
                        target_subject=str(subject),
                    )
                    raise ValueError("Parent comment does not belong to this subject")

            comment = Comment.for_subject(
                subject,
                id=CommentId(uuid4()),
                body=body,
                author_name=author_name,
                parent_id=parent_id,
                approved=self.comment_settings.auto_approve,
            )

            saved = await self.comment_repository.insert(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                subject=str(subject),
                is_reply=parent_id is not None,
                approved=saved.approved,
            )
            return saved

    async def get_comment_tree(self, subject: Subject) -> list[CommentNode]:
        """Fetch the eligible comments of a subject and build the reply tree.

        Args:
            subject: Article or video

        Returns:
            Root nodes of a freshly built tree
        """
        with logfire.span("comment_service.get_comment_tree", subject=str(subject)):
            comments = await self.comment_repository.fetch_approved_for(subject)
            roots = build_comment_tree(comments)
            logfire.info(
                "Comment tree built",
                subject=str(subject),
                count=len(comments),
                roots=len(roots),
            )
            return roots

    async def count_comments(self, subject: Subject) -> int:
        """Count approved comments on a subject."""
        return await self.comment_repository.count_approved_for(subject)

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: Comment ID

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                subject=str(comment.subject),
            )
