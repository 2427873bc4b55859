"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dami.config import Settings
from dami.interface.api.errors import register_error_handlers
from dami.interface.api.routes import (
    admin,
    articles,
    comments,
    health,
    likes,
    videos,
)
from dami.util.di.container import create_container, setup_di
from dami.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from (production container
            when omitted)

    Raises:
        ConfigurationError: If staging/production runs with placeholder secrets
    """
    settings = Settings()
    settings.check_secrets()

    app_instance = FastAPI(
        title="DevOps WithDami API",
        description="Backend API for DevOps WithDami - articles, videos and their discussions",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "X-Client-Id",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    # Fixed paths (/client-id, /admin/...) before the /{kind}/{id}/... patterns
    app_instance.include_router(admin.router)
    app_instance.include_router(articles.admin_router)
    app_instance.include_router(videos.admin_router)
    app_instance.include_router(likes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(articles.router)
    app_instance.include_router(videos.router)

    return app_instance
