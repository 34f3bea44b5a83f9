"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qna.config import Settings
from qna.interface.api.routes import (
    admin,
    answers,
    auth,
    health,
    messages,
    questions,
    tags,
    users,
    votes,
)
from qna.interface.error import register_error_handlers
from qna.util.di.container import create_container, setup_di
from qna.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted (tests pass one backed by in-memory repositories)
    """
    settings = Settings()

    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        # Disposes the APP-scoped engine and its connection pool
        await container.close()

    app_instance = FastAPI(
        title="Q&A Community API",
        description="Backend API for a community question and answer site",
        version=health.API_VERSION,
        lifespan=lifespan,
    )

    if settings.environment != "test":
        instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "Cache-Control"],
        max_age=600,
    )

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(users.router)
    app_instance.include_router(messages.router)
    app_instance.include_router(admin.router)

    return app_instance
