"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from dami.domain.model import Article, Comment, Like, Video
from dami.domain.value import (
    ArticleId,
    ClientId,
    CommentId,
    LikeId,
    VideoId,
    YoutubeId,
)


def _uuid(value: Any) -> UUID | None:
    """Coerce a row value to UUID (drivers may hand back str)."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        excerpt=row["excerpt"],
        content=row["content"],
        category=row["category"],
        featured_image=row["featured_image"],
        tags=list(row.get("tags") or []),
        reading_time=row["reading_time"],
        publish_date=row["publish_date"],
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return article.model_dump()


def row_to_video(row: Dict[str, Any]) -> Video:
    """Convert database row to Video domain model.

    Args:
        row: Database row as dict

    Returns:
        Video domain model
    """
    return Video(
        id=VideoId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        youtube_id=YoutubeId(row["youtube_id"]),
        category=row["category"],
        thumbnail=row["thumbnail"],
        duration=row.get("duration") or "",
        views=row.get("views") or "0",
        publish_date=row["publish_date"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def video_to_dict(video: Video) -> Dict[str, Any]:
    """Convert Video domain model to database dict.

    Value objects are unwrapped to their primitive values.
    """
    data = video.model_dump()
    data["youtube_id"] = str(video.youtube_id)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        body=row["body"],
        author_name=row.get("author_name"),
        article_id=_uuid(row.get("article_id")),
        video_id=_uuid(row.get("video_id")),
        parent_id=CommentId(parent_id) if parent_id else None,
        approved=row["approved"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model.

    Args:
        row: Database row as dict

    Returns:
        Like domain model
    """
    return Like(
        id=LikeId(_uuid(row["id"])),
        client_id=ClientId(row["client_id"]),
        article_id=_uuid(row.get("article_id")),
        video_id=_uuid(row.get("video_id")),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    data = like.model_dump()
    data["client_id"] = str(like.client_id)
    return data
