"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alumni.config import Settings
from alumni.interface.api.errors import register_error_handlers
from alumni.interface.api.routes import comments, health, likes, replies
from alumni.util.di.container import create_container, setup_di
from alumni.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a test container.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Alumni Network API",
        description="Backend API for the alumni network: comments, threaded replies and likes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Cookies carry the auth token, so credentials must be allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance, settings)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(replies.router)
    app_instance.include_router(likes.router)

    return app_instance


# Logfire must be configured before this module is imported
app = create_app()
