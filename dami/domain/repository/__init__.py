"""Repository interfaces for the DevOps WithDami domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from dami.domain.repository.article import ArticleRepository
from dami.domain.repository.comment import CommentRepository
from dami.domain.repository.like import LikeRepository
from dami.domain.repository.video import VideoRepository

__all__ = [
    "ArticleRepository",
    "VideoRepository",
    "CommentRepository",
    "LikeRepository",
]
