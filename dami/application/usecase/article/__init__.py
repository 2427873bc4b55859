"""Article use cases."""

from .common import ArticleResponse, ArticleSummary
from .get_article import GetArticleRequest, GetArticleUseCase
from .list_articles import (
    ListArticleCategoriesUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from .manage_article import (
    ArticleChanges,
    ArticleFields,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)

__all__ = [
    "ArticleChanges",
    "ArticleFields",
    "ArticleResponse",
    "ArticleSummary",
    "CreateArticleUseCase",
    "DeleteArticleRequest",
    "DeleteArticleUseCase",
    "GetArticleRequest",
    "GetArticleUseCase",
    "ListArticleCategoriesUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesUseCase",
    "UpdateArticleRequest",
    "UpdateArticleUseCase",
]
