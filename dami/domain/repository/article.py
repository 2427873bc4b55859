"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from dami.domain.model.article import Article
from dami.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Article]:
        """Find articles, newest first (by created_at).

        Args:
            category: Only return articles in this category
            limit: Maximum number of articles to return (None for all)

        Returns:
            List of articles
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all articles."""
        pass

    @abstractmethod
    async def list_categories(self) -> List[str]:
        """Distinct categories in newest-first order of first appearance."""
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article.

        Returns:
            True if an article was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def increment_views(self, article_id: ArticleId) -> None:
        """Atomically increment the view counter by 1.

        Args:
            article_id: The article ID
        """
        pass
