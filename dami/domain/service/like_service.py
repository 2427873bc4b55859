"""Like domain service."""

from dataclasses import dataclass
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from dami.domain.model.like import Like
from dami.domain.repository import LikeRepository
from dami.domain.value import ClientId, LikeId, Subject

from .base import Service


@dataclass(frozen=True)
class LikeStatus:
    """Whether a client likes a subject, and the subject's like total."""

    liked: bool
    likes: int


class LikeService(Service):
    """Domain service for like operations.

    The client identity is always passed in by the caller; the service
    never reads it from ambient state.
    """

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def get_like_status(self, subject: Subject, client_id: ClientId) -> LikeStatus:
        """Get a client's like state on a subject.

        Args:
            subject: Article or video
            client_id: Anonymous client identifier

        Returns:
            Like status with the current total
        """
        with logfire.span("like_service.get_like_status", subject=str(subject)):
            like = await self.like_repository.find_by_client_and_subject(
                client_id, subject
            )
            likes = await self.like_repository.count_by_subject(subject)
            return LikeStatus(liked=like is not None, likes=likes)

    async def like(self, subject: Subject, client_id: ClientId) -> Like:
        """Like a subject.

        Args:
            subject: Article or video
            client_id: Anonymous client identifier

        Returns:
            Created like

        Raises:
            ValueError: If the client already liked this subject
        """
        with logfire.span("like_service.like", subject=str(subject)):
            like = Like(
                id=LikeId(uuid4()),
                client_id=client_id,
                article_id=subject.article_id,
                video_id=subject.video_id,
            )
            try:
                saved = await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn("Duplicate like attempt", subject=str(subject))
                raise ValueError("Already liked")

            logfire.info("Like added", like_id=str(saved.id), subject=str(subject))
            return saved

    async def unlike(self, subject: Subject, client_id: ClientId) -> bool:
        """Remove a client's like from a subject.

        Returns:
            True if a like was removed, False if the client had not liked it
        """
        with logfire.span("like_service.unlike", subject=str(subject)):
            removed = await self.like_repository.delete_by_client_and_subject(
                client_id, subject
            )
            if removed:
                logfire.info("Like removed", subject=str(subject))
            return removed

    async def toggle_like(self, subject: Subject, client_id: ClientId) -> LikeStatus:
        """Like the subject if not liked yet, otherwise remove the like.

        Returns:
            The new like status
        """
        status = await self.get_like_status(subject, client_id)
        if status.liked:
            await self.unlike(subject, client_id)
        else:
            await self.like(subject, client_id)
        return await self.get_like_status(subject, client_id)
