"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .video import InMemoryVideoRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryVideoRepository",
]
