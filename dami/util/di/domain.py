"""Domain layer DI providers."""

from dishka import Scope, provide

from dami.config import AuthSettings, CommentSettings
from dami.domain.repository import (
    ArticleRepository,
    CommentRepository,
    LikeRepository,
    VideoRepository,
)
from dami.domain.service import (
    AdminAuthService,
    ArticleService,
    CommentService,
    JWTService,
    LikeService,
    VideoService,
)
from dami.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_admin_auth_service(self, auth_settings: AuthSettings) -> AdminAuthService:
        """Provide admin credential checking service."""
        return AdminAuthService(auth_settings=auth_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_video_service(self, video_repository: VideoRepository) -> VideoService:
        """Provide video domain service."""
        return VideoService(video_repository=video_repository)
