"""Article response models."""

from datetime import date, datetime

from pydantic import BaseModel

from dami.application.formatting import format_date, format_views
from dami.domain.model import Article


class ArticleSummary(BaseModel):
    """Article card as shown in lists."""

    article_id: str
    title: str
    excerpt: str
    category: str
    featured_image: str
    tags: list[str]
    reading_time: str
    publish_date: date
    publish_date_display: str
    views: int
    views_display: str
    created_at: datetime

    @classmethod
    def from_domain(cls, article: Article) -> "ArticleSummary":
        return cls(**_summary_fields(article))


class ArticleResponse(ArticleSummary):
    """Full article, including the HTML body."""

    content: str
    updated_at: datetime

    @classmethod
    def from_domain(cls, article: Article) -> "ArticleResponse":
        return cls(
            **_summary_fields(article),
            content=article.content,
            updated_at=article.updated_at,
        )


def _summary_fields(article: Article) -> dict:
    return {
        "article_id": str(article.id),
        "title": article.title,
        "excerpt": article.excerpt,
        "category": article.category,
        "featured_image": article.featured_image,
        "tags": list(article.tags),
        "reading_time": article.reading_time,
        "publish_date": article.publish_date,
        "publish_date_display": format_date(article.publish_date),
        "views": article.views,
        "views_display": format_views(article.views),
        "created_at": article.created_at,
    }
