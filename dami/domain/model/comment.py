"""Comment entity and reply-tree node.

Comments are threaded discussions on an article or a video. Storage keeps
them flat (each row points at its parent); the nested view is derived on
demand by the comment tree builder and never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from dami.domain.model.common import DomainModel, utc_now
from dami.domain.value import CommentId, Subject

ANONYMOUS_LABEL = "Anonymous"


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or video, or a reply to another
    comment. Exactly one of article_id / video_id is set.
    """

    id: CommentId
    body: str = Field(min_length=1, max_length=10000)
    author_name: Optional[str] = Field(default=None, max_length=100)
    article_id: Optional[UUID] = None
    video_id: Optional[UUID] = None
    parent_id: Optional[CommentId] = None
    approved: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_single_subject(self) -> "Comment":
        """Validate that exactly one subject key is set."""
        if (self.article_id is None) == (self.video_id is None):
            raise ValueError("Comment must belong to exactly one article or video")
        return self

    @classmethod
    def for_subject(cls, subject: Subject, **fields) -> "Comment":
        """Create a comment tagged with the subject's foreign key."""
        return cls(
            article_id=subject.article_id,
            video_id=subject.video_id,
            **fields,
        )

    @property
    def subject(self) -> Subject:
        if self.article_id is not None:
            return Subject.article(self.article_id)
        return Subject.video(self.video_id)

    @property
    def author_label(self) -> str:
        """Display name, falling back to the anonymous label."""
        if self.author_name and self.author_name.strip():
            return self.author_name
        return ANONYMOUS_LABEL


@dataclass
class CommentNode:
    """Node in a comment reply tree.

    Wraps one comment and owns the list of its direct replies. A node is
    referenced from exactly one list (the root list or one parent's
    replies).
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def parent_id(self) -> CommentId | None:
        return self.comment.parent_id

    @property
    def created_at(self) -> datetime:
        return self.comment.created_at

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.replies))
