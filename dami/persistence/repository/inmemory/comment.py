"""In-memory comment repository for testing."""

from typing import Optional

from dami.domain.model.comment import Comment
from dami.domain.repository.comment import CommentRepository
from dami.domain.value import CommentId, Subject


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def fetch_approved_for(self, subject: Subject) -> list[Comment]:
        """Fetch approved comments of a subject, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.subject == subject and c.approved
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def insert(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and detach its replies, like ON DELETE SET NULL."""
        if self._comments.pop(comment_id, None) is None:
            return
        for reply_id, reply in list(self._comments.items()):
            if reply.parent_id == comment_id:
                self._comments[reply_id] = reply.model_copy(update={"parent_id": None})

    async def count_approved_for(self, subject: Subject) -> int:
        return len(await self.fetch_approved_for(subject))
