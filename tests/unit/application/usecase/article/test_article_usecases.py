"""Unit tests for the article use cases."""

from datetime import date
from uuid import uuid4

import pytest

from dami.application.usecase.article import (
    ArticleChanges,
    ArticleFields,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    GetArticleRequest,
    GetArticleUseCase,
    ListArticleCategoriesUseCase,
    ListArticlesRequest,
    ListArticlesUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from dami.domain.error import NotFoundError, ValidationError
from dami.domain.repository import ArticleRepository
from tests.conftest import make_article
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _fields(**overrides) -> ArticleFields:
    values = {
        "title": "Observability 101",
        "excerpt": "Logs, metrics and traces",
        "content": "<p>Start with structured logs.</p>",
        "category": "Technology",
        "featured_image": "https://images.example.com/o11y.png",
        "tags": ["observability", "logging"],
        "publish_date": date(2024, 1, 2),
    }
    return ArticleFields(**{**values, **overrides})


class TestGetArticleUseCase:
    """Tests for GetArticleUseCase."""

    @pytest.mark.asyncio
    async def test_public_read_records_a_view(self, unit_env):
        get_article = await unit_env.get(GetArticleUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article(views=1199))

        response = await get_article.execute(
            GetArticleRequest(article_id=str(article.id))
        )

        assert response.views == 1200
        assert response.views_display == "1.2K"
        assert response.content == article.content
        assert (await article_repo.find_by_id(article.id)).views == 1200

    @pytest.mark.asyncio
    async def test_admin_read_does_not_record_a_view(self, unit_env):
        get_article = await unit_env.get(GetArticleUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article(views=7))

        response = await get_article.execute(
            GetArticleRequest(article_id=str(article.id), record_view=False)
        )

        assert response.views == 7
        assert (await article_repo.find_by_id(article.id)).views == 7

    @pytest.mark.asyncio
    @pytest.mark.parametrize("article_id", [str(uuid4()), "not-a-uuid"])
    async def test_missing_article(self, unit_env, article_id):
        get_article = await unit_env.get(GetArticleUseCase)

        with pytest.raises(NotFoundError):
            await get_article.execute(GetArticleRequest(article_id=article_id))


class TestListArticlesUseCase:
    @pytest.mark.asyncio
    async def test_list_and_categories(self, unit_env):
        list_articles = await unit_env.get(ListArticlesUseCase)
        list_categories = await unit_env.get(ListArticleCategoriesUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        await article_repo.save(make_article(category="Health"))

        response = await list_articles.execute(ListArticlesRequest(category="All"))
        empty = await list_articles.execute(ListArticlesRequest(category="Science"))

        assert response.total == 1
        assert response.articles[0].category == "Health"
        assert empty.total == 0
        assert await list_categories.execute() == ["All", "Health"]


class TestManageArticleUseCases:
    """Tests for admin create, update and delete."""

    @pytest.mark.asyncio
    async def test_create_update_delete(self, unit_env):
        create_article = await unit_env.get(CreateArticleUseCase)
        update_article = await unit_env.get(UpdateArticleUseCase)
        delete_article = await unit_env.get(DeleteArticleUseCase)
        list_articles = await unit_env.get(ListArticlesUseCase)

        created = await create_article.execute(_fields())
        assert created.publish_date_display == "Jan 2, 2024"
        assert created.tags == ["observability", "logging"]

        updated = await update_article.execute(
            UpdateArticleRequest(
                article_id=created.article_id,
                changes=ArticleChanges(reading_time="8 min read"),
            )
        )
        assert updated.reading_time == "8 min read"
        assert updated.title == created.title

        await delete_article.execute(DeleteArticleRequest(article_id=created.article_id))
        assert (await list_articles.execute(ListArticlesRequest())).total == 0

    @pytest.mark.asyncio
    async def test_create_with_unknown_category_rejected(self, unit_env):
        create_article = await unit_env.get(CreateArticleUseCase)

        with pytest.raises(ValidationError):
            await create_article.execute(_fields(category="Cooking"))

    @pytest.mark.asyncio
    async def test_update_missing_article_raises(self, unit_env):
        update_article = await unit_env.get(UpdateArticleUseCase)

        with pytest.raises(NotFoundError):
            await update_article.execute(
                UpdateArticleRequest(
                    article_id=str(uuid4()), changes=ArticleChanges(title="New")
                )
            )
