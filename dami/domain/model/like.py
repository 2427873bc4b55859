"""Like entity.

Likes are anonymous: each one is tagged with the caller-supplied client id
rather than a user account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from dami.domain.model.common import DomainModel, utc_now
from dami.domain.value import ClientId, LikeId, Subject


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per client per subject (enforced by unique constraints)
    - Exactly one of article_id / video_id is set
    """

    id: LikeId
    client_id: ClientId
    article_id: Optional[UUID] = None
    video_id: Optional[UUID] = None
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_single_subject(self) -> "Like":
        """Validate that exactly one subject key is set."""
        if (self.article_id is None) == (self.video_id is None):
            raise ValueError("Like must belong to exactly one article or video")
        return self

    @property
    def subject(self) -> Subject:
        if self.article_id is not None:
            return Subject.article(self.article_id)
        return Subject.video(self.video_id)
