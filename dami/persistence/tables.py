"""SQLAlchemy table definitions for DevOps WithDami.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("excerpt", String(500), nullable=False),
    Column("content", Text, nullable=False),  # HTML from the rich-text editor
    Column("category", String(50), nullable=False),
    Column("featured_image", Text, nullable=False),
    Column(
        "tags",
        postgresql.ARRAY(Text),
        nullable=False,
        server_default="{}",
    ),
    Column("reading_time", String(50), nullable=False, server_default="5 min read"),
    Column("publish_date", Date, nullable=False, server_default="CURRENT_DATE"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="articles_views_non_negative"),
)

Index("idx_articles_created_at", articles_table.c.created_at.desc())
Index("idx_articles_category", articles_table.c.category)

# ============================================================================
# VIDEOS TABLE
# ============================================================================
videos_table = Table(
    "videos",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("youtube_id", String(64), nullable=False),
    Column("category", String(50), nullable=False),
    Column("thumbnail", Text, nullable=False),
    Column("duration", String(20), nullable=False, server_default=""),
    Column("views", String(20), nullable=False, server_default="0"),
    Column("publish_date", Date, nullable=False, server_default="CURRENT_DATE"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_videos_created_at", videos_table.c.created_at.desc())
Index("idx_videos_category", videos_table.c.category)

# ============================================================================
# COMMENTS TABLE (flat rows, tree built on read)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("body", Text, nullable=False),
    Column("author_name", String(100), nullable=True),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "video_id",
        UUID,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=True,
    ),
    # Replies outlive a deleted parent and become top-level comments
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("approved", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(article_id IS NULL) <> (video_id IS NULL)",
        name="comments_single_subject",
    ),
    CheckConstraint("length(body) > 0", name="comments_body_not_empty"),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_video_id", comments_table.c.video_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# LIKES TABLE (anonymous, one per client per subject)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("client_id", String(255), nullable=False),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "video_id",
        UUID,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(article_id IS NULL) <> (video_id IS NULL)",
        name="likes_single_subject",
    ),
    UniqueConstraint("client_id", "article_id", name="uq_likes_client_article"),
    UniqueConstraint("client_id", "video_id", name="uq_likes_client_video"),
)

Index("idx_likes_article_id", likes_table.c.article_id)
Index("idx_likes_video_id", likes_table.c.video_id)
