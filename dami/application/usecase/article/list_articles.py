"""List articles use case."""

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.service import ArticleService

from .common import ArticleSummary


class ListArticlesRequest(BaseModel):
    """List articles request."""

    category: str | None = None  # "All" or None for every category
    featured: bool = False  # Only the latest few, for the home page


class ListArticlesResponse(BaseModel):
    """List articles response."""

    articles: list[ArticleSummary]
    total: int


class ListArticlesUseCase(BaseUseCase):
    """Use case for listing articles, newest first."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize list articles use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        if request.featured:
            articles = await self.article_service.get_featured()
        else:
            articles = await self.article_service.list_articles(
                category=request.category
            )
        items = [ArticleSummary.from_domain(article) for article in articles]
        return ListArticlesResponse(articles=items, total=len(items))


class ListArticleCategoriesUseCase(BaseUseCase):
    """Use case for the category filter: "All" followed by used categories."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: None = None) -> list[str]:
        return await self.article_service.list_categories()
