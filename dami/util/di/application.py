"""Application layer DI providers."""

from dishka import Scope, provide

from dami.application.usecase.admin import (
    AdminLoginUseCase,
    GetCurrentAdminUseCase,
    GetDashboardUseCase,
)
from dami.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleUseCase,
    ListArticleCategoriesUseCase,
    ListArticlesUseCase,
    UpdateArticleUseCase,
)
from dami.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from dami.application.usecase.like import (
    GetLikeStatusUseCase,
    ToggleLikeUseCase,
    UnlikeUseCase,
)
from dami.application.usecase.video import (
    CreateVideoUseCase,
    DeleteVideoUseCase,
    GetVideoUseCase,
    ListVideoCategoriesUseCase,
    ListVideosUseCase,
    UpdateVideoUseCase,
)
from dami.config import CommentSettings
from dami.domain.service import (
    AdminAuthService,
    ArticleService,
    CommentService,
    JWTService,
    LikeService,
    VideoService,
)
from dami.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_comments_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        video_service: VideoService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            article_service=article_service,
            video_service=video_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            video_service=video_service,
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide
    def get_like_status_use_case(
        self,
        like_service: LikeService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> GetLikeStatusUseCase:
        """Provide get like status use case."""
        return GetLikeStatusUseCase(
            like_service=like_service,
            article_service=article_service,
            video_service=video_service,
        )

    @provide
    def get_toggle_like_use_case(
        self,
        like_service: LikeService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            like_service=like_service,
            article_service=article_service,
            video_service=video_service,
        )

    @provide
    def get_unlike_use_case(
        self,
        like_service: LikeService,
        article_service: ArticleService,
        video_service: VideoService,
    ) -> UnlikeUseCase:
        """Provide unlike use case."""
        return UnlikeUseCase(
            like_service=like_service,
            article_service=article_service,
            video_service=video_service,
        )

    # Article use cases
    @provide
    def get_list_articles_use_case(
        self, article_service: ArticleService
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(article_service=article_service)

    @provide
    def get_list_article_categories_use_case(
        self, article_service: ArticleService
    ) -> ListArticleCategoriesUseCase:
        """Provide list article categories use case."""
        return ListArticleCategoriesUseCase(article_service=article_service)

    @provide
    def get_article_use_case(self, article_service: ArticleService) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(article_service=article_service)

    @provide
    def get_create_article_use_case(
        self, article_service: ArticleService
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(article_service=article_service)

    @provide
    def get_update_article_use_case(
        self, article_service: ArticleService
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(article_service=article_service)

    @provide
    def get_delete_article_use_case(
        self, article_service: ArticleService
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(article_service=article_service)

    # Video use cases
    @provide
    def get_list_videos_use_case(self, video_service: VideoService) -> ListVideosUseCase:
        """Provide list videos use case."""
        return ListVideosUseCase(video_service=video_service)

    @provide
    def get_list_video_categories_use_case(
        self, video_service: VideoService
    ) -> ListVideoCategoriesUseCase:
        """Provide list video categories use case."""
        return ListVideoCategoriesUseCase(video_service=video_service)

    @provide
    def get_video_use_case(self, video_service: VideoService) -> GetVideoUseCase:
        """Provide get video use case."""
        return GetVideoUseCase(video_service=video_service)

    @provide
    def get_create_video_use_case(
        self, video_service: VideoService
    ) -> CreateVideoUseCase:
        """Provide create video use case."""
        return CreateVideoUseCase(video_service=video_service)

    @provide
    def get_update_video_use_case(
        self, video_service: VideoService
    ) -> UpdateVideoUseCase:
        """Provide update video use case."""
        return UpdateVideoUseCase(video_service=video_service)

    @provide
    def get_delete_video_use_case(
        self, video_service: VideoService
    ) -> DeleteVideoUseCase:
        """Provide delete video use case."""
        return DeleteVideoUseCase(video_service=video_service)

    # Admin use cases
    @provide
    def get_admin_login_use_case(
        self, admin_auth_service: AdminAuthService, jwt_service: JWTService
    ) -> AdminLoginUseCase:
        """Provide admin login use case."""
        return AdminLoginUseCase(
            admin_auth_service=admin_auth_service, jwt_service=jwt_service
        )

    @provide
    def get_current_admin_use_case(
        self, jwt_service: JWTService, admin_auth_service: AdminAuthService
    ) -> GetCurrentAdminUseCase:
        """Provide get current admin use case."""
        return GetCurrentAdminUseCase(
            jwt_service=jwt_service, admin_auth_service=admin_auth_service
        )

    @provide
    def get_dashboard_use_case(
        self, article_service: ArticleService, video_service: VideoService
    ) -> GetDashboardUseCase:
        """Provide admin dashboard use case."""
        return GetDashboardUseCase(
            article_service=article_service, video_service=video_service
        )
