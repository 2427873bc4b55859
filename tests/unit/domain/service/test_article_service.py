"""Unit tests for ArticleService."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from dami.domain.error import NotFoundError, ValidationError
from dami.domain.repository import ArticleRepository
from dami.domain.service import ArticleService
from dami.domain.value import ArticleId
from tests.conftest import BASE_TIME, make_article
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(repo: ArticleRepository, *categories: str) -> list:
    """Save one article per category, each a day newer than the previous."""
    articles = []
    for offset, category in enumerate(categories):
        article = make_article(
            category=category,
            title=f"Article {offset}",
            created_at=BASE_TIME + timedelta(days=offset),
        )
        articles.append(await repo.save(article))
    return articles


class TestListArticles:
    """Tests for listing and filtering."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        seeded = await _seed(article_repo, "Technology", "Science", "Health")

        articles = await article_service.list_articles()

        assert [a.id for a in articles] == [a.id for a in reversed(seeded)]

    @pytest.mark.asyncio
    async def test_category_filter_and_all(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        await _seed(article_repo, "Technology", "Science", "Technology")

        technology = await article_service.list_articles(category="Technology")
        everything = await article_service.list_articles(category="All")

        assert len(technology) == 2
        assert all(a.category == "Technology" for a in technology)
        assert len(everything) == 3

    @pytest.mark.asyncio
    async def test_featured_is_latest_three(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        seeded = await _seed(article_repo, *["Technology"] * 5)

        featured = await article_service.get_featured()

        assert [a.id for a in featured] == [a.id for a in seeded[:1:-1]]

    @pytest.mark.asyncio
    async def test_categories_start_with_all(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        await _seed(article_repo, "Science", "Technology", "Science")

        categories = await article_service.list_categories()

        assert categories == ["All", "Science", "Technology"]


class TestArticleLifecycle:
    """Tests for create, update, delete and views."""

    @pytest.mark.asyncio
    async def test_create_article(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        article = await article_service.create_article(
            title="  GitOps with Argo CD ",
            excerpt="Declarative delivery",
            content="<h2>Why GitOps</h2><p>...</p>",
            category="Technology",
            featured_image="https://images.example.com/argo.png",
            tags="GitOps, Argo CD",
            publish_date=date(2024, 3, 1),
        )

        assert article.title == "GitOps with Argo CD"
        assert article.tags == ["GitOps", "Argo CD"]
        assert article.reading_time == "5 min read"
        assert article.publish_date == date(2024, 3, 1)
        assert await article_service.count_articles() == 1

    @pytest.mark.asyncio
    async def test_create_with_unknown_category_rejected(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(ValidationError, match="Unknown article category"):
            await article_service.create_article(
                title="Title",
                excerpt="Excerpt",
                content="<p>Body</p>",
                category="Gardening",
                featured_image="https://images.example.com/a.png",
            )

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        original = await article_repo.save(
            make_article(tags=["old"], updated_at=BASE_TIME)
        )

        updated = await article_service.update_article(
            original.id, title="New title", excerpt=None, tags="a, b"
        )

        assert updated.title == "New title"
        assert updated.excerpt == original.excerpt
        assert updated.tags == ["a", "b"]
        assert updated.updated_at > original.updated_at
        assert await article_repo.find_by_id(original.id) == updated

    @pytest.mark.asyncio
    async def test_update_missing_article_raises(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError):
            await article_service.update_article(ArticleId(uuid4()), title="x")

    @pytest.mark.asyncio
    async def test_delete_article(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article())

        await article_service.delete_article(article.id)

        assert await article_service.get_article(article.id) is None
        with pytest.raises(NotFoundError):
            await article_service.delete_article(article.id)

    @pytest.mark.asyncio
    async def test_record_view_increments(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article(views=41))

        await article_service.record_view(article.id)

        stored = await article_service.get_article(article.id)
        assert stored.views == 42
