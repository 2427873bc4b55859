"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from dami.domain.model import Comment
from dami.domain.repository import CommentRepository
from dami.domain.value import CommentId, Subject
from dami.persistence.mappers import comment_to_dict, row_to_comment
from dami.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _approved_for(self, subject: Subject):
        """WHERE clause selecting a subject's approved comments."""
        return and_(
            comments_table.c[subject.type.column] == subject.id,
            comments_table.c.approved.is_(True),
        )

    async def fetch_approved_for(self, subject: Subject) -> List[Comment]:
        """Fetch approved comments of a subject, newest first."""
        stmt = (
            select(comments_table)
            .where(self._approved_for(subject))
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (replies are detached by the parent_id foreign key)."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_approved_for(self, subject: Subject) -> int:
        """Count approved comments for a subject."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._approved_for(subject))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
