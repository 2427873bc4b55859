"""Admin article create, update and delete use cases."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from dami.application.usecase.base import BaseUseCase
from dami.domain.error import NotFoundError
from dami.domain.service import ArticleService
from dami.domain.value import ArticleId

from .common import ArticleResponse


class ArticleFields(BaseModel):
    """Editable article fields, as submitted by the admin editor."""

    title: str = Field(min_length=1, max_length=300)
    excerpt: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1)  # Editor HTML
    category: str
    featured_image: str = Field(min_length=1)
    tags: list[str] | str | None = None  # List or comma separated
    reading_time: str | None = None
    publish_date: date | None = None


class ArticleChanges(BaseModel):
    """Partial article update; omitted fields stay unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    excerpt: str | None = Field(default=None, min_length=1, max_length=500)
    content: str | None = Field(default=None, min_length=1)
    category: str | None = None
    featured_image: str | None = Field(default=None, min_length=1)
    tags: list[str] | str | None = None
    reading_time: str | None = None
    publish_date: date | None = None


class UpdateArticleRequest(BaseModel):
    article_id: str
    changes: ArticleChanges


class DeleteArticleRequest(BaseModel):
    article_id: str


def _article_id(raw: str) -> ArticleId:
    try:
        return ArticleId(UUID(raw))
    except ValueError:
        raise NotFoundError("Article", raw)


class CreateArticleUseCase(BaseUseCase):
    """Use case for publishing a new article."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: ArticleFields) -> ArticleResponse:
        """Create the article.

        Raises:
            ValidationError: If the category is unknown
        """
        article = await self.article_service.create_article(**request.model_dump())
        return ArticleResponse.from_domain(article)


class UpdateArticleUseCase(BaseUseCase):
    """Use case for editing an article."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: UpdateArticleRequest) -> ArticleResponse:
        """Apply the changes.

        Raises:
            NotFoundError: If the article does not exist
            ValidationError: If the category is unknown
        """
        article = await self.article_service.update_article(
            _article_id(request.article_id),
            **request.changes.model_dump(exclude_unset=True),
        )
        return ArticleResponse.from_domain(article)


class DeleteArticleUseCase(BaseUseCase):
    """Use case for deleting an article along with its comments and likes."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: DeleteArticleRequest) -> None:
        await self.article_service.delete_article(_article_id(request.article_id))
