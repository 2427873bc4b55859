"""Domain value objects for DevOps WithDami.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
import secrets
import time
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from dami.domain.value.common import RootValueObject, ValueObject

# Accepted YouTube link shapes: watch?v=, youtu.be/ and /embed/
YOUTUBE_URL_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/embed/([^&\n?#]+)"),
)


class SubjectType(str, Enum):
    """Kind of content a comment or like is attached to."""

    ARTICLE = "article"
    VIDEO = "video"

    @property
    def column(self) -> str:
        """Foreign key column that references this kind of subject."""
        return f"{self.value}_id"


class Subject(ValueObject):
    """The article or video a comment or like belongs to.

    Exactly one of the two mutually exclusive foreign keys (article_id,
    video_id) identifies a subject in storage; this value object carries
    the kind and the id together so callers never juggle both keys.
    """

    type: SubjectType
    id: UUID

    @classmethod
    def article(cls, article_id: UUID) -> "Subject":
        return cls(type=SubjectType.ARTICLE, id=article_id)

    @classmethod
    def video(cls, video_id: UUID) -> "Subject":
        return cls(type=SubjectType.VIDEO, id=video_id)

    @property
    def article_id(self) -> UUID | None:
        return self.id if self.type == SubjectType.ARTICLE else None

    @property
    def video_id(self) -> UUID | None:
        return self.id if self.type == SubjectType.VIDEO else None

    def __str__(self) -> str:
        return f"{self.type.value}:{self.id}"


class ClientId(RootValueObject[str]):
    """Pseudo-anonymous per-browser identifier used to tag likes.

    Supplied explicitly by the caller on every request. Clients without one
    can obtain a fresh value from new_client_id().
    """

    @field_validator("root")
    @classmethod
    def validate_client_id(cls, v: str) -> str:
        """Validate client id is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Client id must be 1-255 characters")
        return v


def new_client_id() -> ClientId:
    """Generate a fresh anonymous client id (anon_<random><time>)."""
    random_part = secrets.token_hex(6)
    time_part = format(int(time.time() * 1000), "x")
    return ClientId(f"anon_{random_part}{time_part}")


class YoutubeId(RootValueObject[str]):
    """YouTube video id, as used in watch, embed and thumbnail URLs."""

    @field_validator("root")
    @classmethod
    def validate_youtube_id(cls, v: str) -> str:
        """Validate id is a non-empty URL-safe token."""
        if not re.match(r"^[A-Za-z0-9_-]{1,64}$", v):
            raise ValueError("YouTube id must be 1-64 URL-safe characters")
        return v

    @classmethod
    def from_url(cls, url: str) -> "YoutubeId | None":
        """Extract the video id from a YouTube link.

        Args:
            url: watch, short (youtu.be) or embed link

        Returns:
            YoutubeId if the link matches a known shape, None otherwise
        """
        for pattern in YOUTUBE_URL_PATTERNS:
            match = pattern.search(url.strip())
            if match and match.group(1):
                try:
                    return cls(match.group(1))
                except ValueError:
                    return None
        return None

    @property
    def embed_url(self) -> str:
        return f"https://www.youtube.com/embed/{self.root}"

    @property
    def thumbnail_url(self) -> str:
        return f"https://img.youtube.com/vi/{self.root}/maxresdefault.jpg"
