"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from dami.domain.model.comment import Comment
from dami.domain.value import CommentId, Subject


class CommentRepository(ABC):
    """Repository for Comment entity.

    Typed replacement for ad-hoc filter strings against the hosted store:
    every query the comment layer needs is an explicit method here.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def fetch_approved_for(self, subject: Subject) -> List[Comment]:
        """Fetch the eligible (approved) comments of one subject.

        Args:
            subject: The article or video

        Returns:
            Flat list of approved comments, newest first
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Replies to the deleted comment are kept and show up as top-level
        comments from then on.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def count_approved_for(self, subject: Subject) -> int:
        """Count approved comments for a subject.

        Args:
            subject: The article or video

        Returns:
            Number of approved comments
        """
        pass
