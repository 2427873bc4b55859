"""In-memory article repository for testing."""

from typing import Optional

from dami.domain.model.article import Article
from dami.domain.repository.article import ArticleRepository
from dami.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        return self._articles.get(article_id)

    async def find_all(
        self,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[Article]:
        articles = list(self._articles.values())
        if category:
            articles = [a for a in articles if a.category == category]
        articles.sort(key=lambda a: a.created_at, reverse=True)
        return articles if limit is None else articles[:limit]

    async def count(self) -> int:
        return len(self._articles)

    async def list_categories(self) -> list[str]:
        """Distinct categories, most recently used first."""
        articles = await self.find_all()
        return list(dict.fromkeys(a.category for a in articles))

    async def save(self, article: Article) -> Article:
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: ArticleId) -> bool:
        return self._articles.pop(article_id, None) is not None

    async def increment_views(self, article_id: ArticleId) -> None:
        article = self._articles.get(article_id)
        if article:
            self._articles[article_id] = article.model_copy(
                update={"views": article.views + 1}
            )
