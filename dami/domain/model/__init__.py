"""Domain model entities for DevOps WithDami."""

from dami.domain.model.article import ARTICLE_CATEGORIES, Article, parse_tags
from dami.domain.model.comment import ANONYMOUS_LABEL, Comment, CommentNode
from dami.domain.model.like import Like
from dami.domain.model.video import VIDEO_CATEGORIES, Video

__all__ = [
    "Article",
    "Video",
    "Comment",
    "CommentNode",
    "Like",
    "ANONYMOUS_LABEL",
    "ARTICLE_CATEGORIES",
    "VIDEO_CATEGORIES",
    "parse_tags",
]
