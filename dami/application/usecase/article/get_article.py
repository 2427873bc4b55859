"""Get article use case."""

from uuid import UUID

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.error import NotFoundError
from dami.domain.service import ArticleService
from dami.domain.value import ArticleId

from .common import ArticleResponse


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: str  # UUID string
    record_view: bool = True  # Public reads count as a view, admin reads do not


class GetArticleUseCase(BaseUseCase):
    """Use case for reading one article."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize get article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: GetArticleRequest) -> ArticleResponse:
        """Execute get article flow.

        Args:
            request: Article id and whether to count the read as a view

        Returns:
            The article, with the view already counted

        Raises:
            NotFoundError: If the article does not exist
        """
        try:
            article_id = ArticleId(UUID(request.article_id))
        except ValueError:
            raise NotFoundError("Article", request.article_id)

        article = await self.article_service.get_article(article_id)
        if not article:
            raise NotFoundError("Article", request.article_id)

        if request.record_view:
            await self.article_service.record_view(article_id)
            article = article.model_copy(update={"views": article.views + 1})

        return ArticleResponse.from_domain(article)
