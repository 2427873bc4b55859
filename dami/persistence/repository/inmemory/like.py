"""In-memory like repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from dami.domain.model.like import Like
from dami.domain.repository.like import LikeRepository
from dami.domain.value import ClientId, Subject


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def find_by_client_and_subject(
        self, client_id: ClientId, subject: Subject
    ) -> Optional[Like]:
        for like in self._likes:
            if like.client_id == client_id and like.subject == subject:
                return like
        return None

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the client already liked the subject
        """
        existing = await self.find_by_client_and_subject(like.client_id, like.subject)
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_client_and_subject(
        self, client_id: ClientId, subject: Subject
    ) -> bool:
        for i, like in enumerate(self._likes):
            if like.client_id == client_id and like.subject == subject:
                self._likes.pop(i)
                return True
        return False

    async def count_by_subject(self, subject: Subject) -> int:
        return sum(1 for like in self._likes if like.subject == subject)
