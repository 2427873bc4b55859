"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from dami.domain.model import Article, Comment, Video
from dami.domain.value import ArticleId, CommentId, Subject, VideoId, YoutubeId

# Keep spans and events local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_article(**fields) -> Article:
    """Build an article with sensible defaults for tests."""
    defaults = {
        "id": ArticleId(uuid4()),
        "title": "Kubernetes from scratch",
        "excerpt": "Running a cluster by hand",
        "content": "<p>Start with etcd.</p>",
        "category": "Technology",
        "featured_image": "https://images.example.com/k8s.png",
    }
    return Article(**{**defaults, **fields})


def make_video(**fields) -> Video:
    """Build a video with sensible defaults for tests."""
    defaults = {
        "id": VideoId(uuid4()),
        "title": "Terraform in 10 minutes",
        "description": "State, plans and modules",
        "youtube_id": YoutubeId("dQw4w9WgXcQ"),
        "category": "Tutorial",
        "thumbnail": "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg",
    }
    return Video(**{**defaults, **fields})


def make_comment(
    subject: Subject,
    minutes: int = 0,
    parent: Comment | None = None,
    **fields,
) -> Comment:
    """Build a comment created `minutes` after BASE_TIME."""
    created_at = BASE_TIME + timedelta(minutes=minutes)
    defaults = {
        "id": CommentId(uuid4()),
        "body": "Great write-up",
        "parent_id": parent.id if parent else None,
        "created_at": created_at,
        "updated_at": created_at,
    }
    return Comment.for_subject(subject, **{**defaults, **fields})
