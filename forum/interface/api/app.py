"""FastAPI application."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.interface.api.routes import comments, health, likes, replies, threads
from forum.interface.error import register_error_handlers
from forum.util.di import PROVIDERS, get_provider
from forum.util.observability import instrument_fastapi


def _production_container() -> AsyncContainer:
    """Container with the production implementation of every provider."""
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted
    """
    app_instance = FastAPI(
        title="Forum API",
        description="Threads, comments, replies and likes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    # Providers resolve lazily, on the first request
    setup_dishka(container or _production_container(), app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(replies.router)
    app_instance.include_router(likes.router)

    return app_instance
