"""Domain services."""

from .admin_auth_service import AdminAuthService, hash_password
from .article_service import ArticleService
from .base import Service
from .comment_service import CommentService
from .comment_tree import build_comment_tree, count_nodes
from .jwt_service import JWTService
from .like_service import LikeService, LikeStatus
from .video_service import VideoService, parse_youtube_url

__all__ = [
    "AdminAuthService",
    "ArticleService",
    "CommentService",
    "JWTService",
    "LikeService",
    "LikeStatus",
    "Service",
    "VideoService",
    "build_comment_tree",
    "count_nodes",
    "hash_password",
    "parse_youtube_url",
]
