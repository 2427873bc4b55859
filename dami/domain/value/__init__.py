"""Domain value objects for DevOps WithDami."""

from dami.domain.value.identifiers import (
    ArticleId,
    CommentId,
    LikeId,
    VideoId,
)
from dami.domain.value.types import (
    ClientId,
    Subject,
    SubjectType,
    YoutubeId,
    new_client_id,
)

__all__ = [
    # Identifiers
    "ArticleId",
    "VideoId",
    "CommentId",
    "LikeId",
    # Types
    "ClientId",
    "Subject",
    "SubjectType",
    "YoutubeId",
    "new_client_id",
]
