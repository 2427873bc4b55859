"""PostgreSQL implementation of Video repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dami.domain.model import Video
from dami.domain.repository import VideoRepository
from dami.domain.value import VideoId
from dami.persistence.mappers import row_to_video, video_to_dict
from dami.persistence.tables import videos_table


class PostgresVideoRepository(VideoRepository):
    """PostgreSQL implementation of VideoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        stmt = select(videos_table).where(videos_table.c.id == video_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_video(row._asdict()) if row else None

    async def find_all(
        self,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Video]:
        """Find videos, newest first."""
        stmt = select(videos_table)
        if category:
            stmt = stmt.where(videos_table.c.category == category)
        stmt = stmt.order_by(desc(videos_table.c.created_at))
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_video(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all videos."""
        stmt = select(func.count()).select_from(videos_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_categories(self) -> List[str]:
        """Distinct categories, most recently used first."""
        stmt = (
            select(videos_table.c.category)
            .group_by(videos_table.c.category)
            .order_by(desc(func.max(videos_table.c.created_at)))
        )
        result = await self.session.execute(stmt)
        return [row.category for row in result.fetchall()]

    async def save(self, video: Video) -> Video:
        """Save a video (create or update)."""
        video_dict = video_to_dict(video)
        existing = await self.find_by_id(video.id)

        if existing:
            stmt = (
                update(videos_table)
                .where(videos_table.c.id == video.id)
                .values(**video_dict)
            )
        else:
            stmt = insert(videos_table).values(**video_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return video

    async def delete(self, video_id: VideoId) -> bool:
        """Delete a video (comments and likes cascade)."""
        stmt = delete(videos_table).where(videos_table.c.id == video_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
