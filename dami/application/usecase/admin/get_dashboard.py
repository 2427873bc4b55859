"""Admin dashboard use case."""

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.service import ArticleService, VideoService


class DashboardResponse(BaseModel):
    """Catalog totals shown on the admin dashboard."""

    articles: int
    videos: int


class GetDashboardUseCase(BaseUseCase):
    """Use case for the admin dashboard counters."""

    def __init__(
        self, article_service: ArticleService, video_service: VideoService
    ) -> None:
        self.article_service = article_service
        self.video_service = video_service

    async def execute(self, request: None = None) -> DashboardResponse:
        return DashboardResponse(
            articles=await self.article_service.count_articles(),
            videos=await self.video_service.count_videos(),
        )
