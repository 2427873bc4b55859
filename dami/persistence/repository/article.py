"""PostgreSQL implementation of Article repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dami.domain.model import Article
from dami.domain.repository import ArticleRepository
from dami.domain.value import ArticleId
from dami.persistence.mappers import article_to_dict, row_to_article
from dami.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_all(
        self,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Article]:
        """Find articles, newest first."""
        stmt = select(articles_table)
        if category:
            stmt = stmt.where(articles_table.c.category == category)
        stmt = stmt.order_by(desc(articles_table.c.created_at))
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all articles."""
        stmt = select(func.count()).select_from(articles_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_categories(self) -> List[str]:
        """Distinct categories, most recently used first."""
        latest = func.max(articles_table.c.created_at)
        stmt = (
            select(articles_table.c.category)
            .group_by(articles_table.c.category)
            .order_by(desc(latest))
        )
        result = await self.session.execute(stmt)
        return [row.category for row in result.fetchall()]

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        article_dict = article_to_dict(article)
        existing = await self.find_by_id(article.id)

        if existing:
            stmt = (
                update(articles_table)
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = insert(articles_table).values(**article_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return article

    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article (comments and likes cascade)."""
        stmt = delete(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_views(self, article_id: ArticleId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(articles_table)
            .where(articles_table.c.id == article_id)
            .values(views=articles_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
