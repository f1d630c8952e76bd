"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gh_explorer.infrastructure.config import get_settings
from gh_explorer.interface.dependencies import shutdown, startup
from gh_explorer.interface.error_handlers import register_error_handlers
from gh_explorer.interface.routes import favorites_router, history_router, users_router

_OPENAPI_TAGS = [
    {
        "name": "users",
        "description": "Profiles, repositories and language statistics fetched from GitHub.",
    },
    {"name": "favorites", "description": "Usernames bookmarked by the user."},
    {"name": "history", "description": "Recent searches, kept per device family."},
]


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared GitHub client on startup and close it on shutdown."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="GitHub Profile Explorer",
        version="1.0.0",
        description=(
            "Search GitHub users, browse their repositories and see which "
            f"languages they write in. Data comes from {settings.github_api_base_url}."
        ),
        openapi_tags=_OPENAPI_TAGS,
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    for router in (users_router, favorites_router, history_router):
        app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
