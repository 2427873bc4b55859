"""PostgreSQL repository implementations."""

from dami.persistence.repository.article import PostgresArticleRepository
from dami.persistence.repository.comment import PostgresCommentRepository
from dami.persistence.repository.like import PostgresLikeRepository
from dami.persistence.repository.video import PostgresVideoRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresVideoRepository",
]
