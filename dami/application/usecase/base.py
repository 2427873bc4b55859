"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from dami.domain.error import NotFoundError
from dami.domain.service import ArticleService, VideoService
from dami.domain.value import ArticleId, Subject, SubjectType, VideoId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_subject(subject_type: SubjectType, subject_id: str) -> Subject:
    """Build a subject from route parameters.

    Raises:
        NotFoundError: If the id is not a valid UUID
    """
    try:
        return Subject(type=subject_type, id=UUID(subject_id))
    except ValueError:
        raise NotFoundError(subject_type.value.capitalize(), subject_id)


class SubjectUseCase(BaseUseCase):
    """Use case that acts on an article or video which must exist."""

    def __init__(
        self, article_service: ArticleService, video_service: VideoService
    ) -> None:
        self.article_service = article_service
        self.video_service = video_service

    async def ensure_subject_exists(self, subject: Subject) -> None:
        """Raise NotFoundError unless the article or video exists."""
        if subject.type == SubjectType.ARTICLE:
            found = await self.article_service.get_article(ArticleId(subject.id))
        else:
            found = await self.video_service.get_video(VideoId(subject.id))
        if found is None:
            raise NotFoundError(subject.type.value.capitalize(), str(subject.id))
