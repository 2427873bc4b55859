"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.error import NotFoundError
from dami.domain.service import CommentService
from dami.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request (admin only)."""

    comment_id: str  # UUID string


class DeleteCommentUseCase(BaseUseCase):
    """Use case for removing a comment from the admin panel."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Delete the comment. Its replies become top-level comments.

        Raises:
            NotFoundError: If the comment does not exist
        """
        try:
            comment_id = CommentId(UUID(request.comment_id))
        except ValueError:
            raise NotFoundError("Comment", request.comment_id)
        await self.comment_service.delete_comment(comment_id)
