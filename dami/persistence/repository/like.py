"""PostgreSQL implementation of Like repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from dami.domain.model import Like
from dami.domain.repository import LikeRepository
from dami.domain.value import ClientId, Subject
from dami.persistence.mappers import like_to_dict, row_to_like
from dami.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_client_and_subject(
        self, client_id: ClientId, subject: Subject
    ) -> Optional[Like]:
        """Find a client's like on a specific subject."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.client_id == str(client_id),
                likes_table.c[subject.type.column] == subject.id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def save(self, like: Like) -> Like:
        """Save a like (create).

        The unique constraints raise IntegrityError on a duplicate like. The
        insert runs in a savepoint so the request transaction stays usable.
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    async def delete_by_client_and_subject(
        self, client_id: ClientId, subject: Subject
    ) -> bool:
        """Delete a client's like on a subject."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.client_id == str(client_id),
                likes_table.c[subject.type.column] == subject.id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_subject(self, subject: Subject) -> int:
        """Count likes on a subject."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c[subject.type.column] == subject.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
