"""Article aggregate root.

Articles are long-form posts written in the admin rich-text editor and
stored as the HTML it produces.
"""

from datetime import date, datetime

from pydantic import Field, field_validator

from dami.domain.model.common import DomainModel, utc_now
from dami.domain.value import ArticleId

ARTICLE_CATEGORIES = (
    "Technology",
    "Science",
    "Health",
    "Business",
    "Education",
    "Lifestyle",
)


class Article(DomainModel):
    """Article aggregate root."""

    id: ArticleId
    title: str = Field(min_length=1, max_length=300)
    excerpt: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1)
    category: str = Field(min_length=1, max_length=50)
    featured_image: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    reading_time: str = Field(default="5 min read", max_length=50)
    publish_date: date = Field(default_factory=lambda: utc_now().date())
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: list[str] | str | None) -> list[str]:
        """Accept a comma separated string or a list; drop blanks."""
        return parse_tags(v)


def parse_tags(raw: list[str] | str | None) -> list[str]:
    """Split and trim tags, dropping empty entries.

    Examples:
        "AI, Machine Learning, " -> ["AI", "Machine Learning"]
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    return [tag.strip() for tag in raw if tag and tag.strip()]
