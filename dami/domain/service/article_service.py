"""Article domain service."""

from datetime import date
from uuid import uuid4

import logfire

from dami.domain.error import NotFoundError, ValidationError
from dami.domain.model.article import ARTICLE_CATEGORIES, Article
from dami.domain.model.common import utc_now
from dami.domain.repository import ArticleRepository
from dami.domain.value import ArticleId

from .base import Service

ALL_CATEGORIES = "All"
FEATURED_LIMIT = 3


class ArticleService(Service):
    """Domain service for article operations."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def list_articles(
        self, category: str | None = None, limit: int | None = None
    ) -> list[Article]:
        """List articles newest first.

        Args:
            category: Category filter ("All" or None for every category)
            limit: Maximum number of articles

        Returns:
            List of articles
        """
        if category == ALL_CATEGORIES:
            category = None
        with logfire.span(
            "article_service.list_articles", category=category, limit=limit
        ):
            articles = await self.article_repository.find_all(
                category=category, limit=limit
            )
            logfire.info("Articles retrieved", count=len(articles), category=category)
            return articles

    async def get_featured(self) -> list[Article]:
        """The latest articles shown on the home page."""
        return await self.list_articles(limit=FEATURED_LIMIT)

    async def get_article(self, article_id: ArticleId) -> Article | None:
        """Get an article by ID.

        Args:
            article_id: Article ID

        Returns:
            Article if found, None otherwise
        """
        with logfire.span("article_service.get_article", article_id=str(article_id)):
            article = await self.article_repository.find_by_id(article_id)
            if article:
                logfire.info("Article found", article_id=str(article_id))
            else:
                logfire.warn("Article not found", article_id=str(article_id))
            return article

    async def record_view(self, article_id: ArticleId) -> None:
        """Count one view of an article.

        Uses SQL-level increment to avoid lost updates.
        """
        with logfire.span("article_service.record_view", article_id=str(article_id)):
            await self.article_repository.increment_views(article_id)

    async def list_categories(self) -> list[str]:
        """Categories present in the catalog, prefixed with "All"."""
        categories = await self.article_repository.list_categories()
        return [ALL_CATEGORIES, *categories]

    async def count_articles(self) -> int:
        return await self.article_repository.count()

    async def create_article(
        self,
        title: str,
        excerpt: str,
        content: str,
        category: str,
        featured_image: str,
        tags: list[str] | str | None = None,
        reading_time: str | None = None,
        publish_date: date | None = None,
    ) -> Article:
        """Create an article.

        Args:
            title: Article title
            excerpt: Short summary shown on cards
            content: HTML produced by the rich-text editor
            category: One of the admin categories
            featured_image: Image URL
            tags: Tag list or comma separated string
            reading_time: Display text such as "5 min read"
            publish_date: Publication date (defaults to today)

        Returns:
            Created article

        Raises:
            ValidationError: If the category is unknown
        """
        with logfire.span("article_service.create_article", title=title):
            self._check_category(category)
            fields = {
                "title": title.strip(),
                "excerpt": excerpt.strip(),
                "content": content,
                "category": category,
                "featured_image": featured_image.strip(),
                "tags": tags,
            }
            if reading_time:
                fields["reading_time"] = reading_time
            if publish_date:
                fields["publish_date"] = publish_date

            article = Article(id=ArticleId(uuid4()), **fields)
            saved = await self.article_repository.save(article)
            logfire.info(
                "Article created", article_id=str(saved.id), category=saved.category
            )
            return saved

    async def update_article(self, article_id: ArticleId, **changes) -> Article:
        """Update an article.

        Args:
            article_id: Article ID
            **changes: Fields to change (None values are ignored)

        Returns:
            Updated article

        Raises:
            NotFoundError: If the article does not exist
            ValidationError: If the category is unknown
        """
        with logfire.span("article_service.update_article", article_id=str(article_id)):
            article = await self.article_repository.find_by_id(article_id)
            if not article:
                logfire.warn("Article not found for update", article_id=str(article_id))
                raise NotFoundError("Article", str(article_id))

            changes = {key: value for key, value in changes.items() if value is not None}
            if "category" in changes:
                self._check_category(changes["category"])

            # Re-validate through the model so tag parsing and limits apply
            updated = Article.model_validate(
                {**article.model_dump(), **changes, "updated_at": utc_now()}
            )
            saved = await self.article_repository.save(updated)
            logfire.info(
                "Article updated",
                article_id=str(article_id),
                fields=sorted(changes),
            )
            return saved

    async def delete_article(self, article_id: ArticleId) -> None:
        """Delete an article.

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span("article_service.delete_article", article_id=str(article_id)):
            deleted = await self.article_repository.delete(article_id)
            if not deleted:
                logfire.warn("Article not found for delete", article_id=str(article_id))
                raise NotFoundError("Article", str(article_id))
            logfire.info("Article deleted", article_id=str(article_id))

    @staticmethod
    def _check_category(category: str) -> None:
        if category not in ARTICLE_CATEGORIES:
            raise ValidationError(f"Unknown article category: {category}")
