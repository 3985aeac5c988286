"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from motohub.auth.router import router as auth_router
from motohub.config import get_settings
from motohub.database import close_db, create_tables, init_db
from motohub.health.router import router as health_router
from motohub.middleware import setup_middleware
from motohub.motorcycles.router import router as motorcycles_router
from motohub.posts.router import router as posts_router
from motohub.profiles.router import router as profiles_router
from motohub.redis_client import close_redis, init_redis


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    await init_db(settings.database_url)
    await create_tables()
    await init_redis(settings.redis_url)

    yield

    await close_db()
    await close_redis()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="MotoHub API",
        description="Backend API for MotoHub, a social platform for motorcycle riders",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(posts_router)
    app.include_router(motorcycles_router)
    app.include_router(profiles_router)

    return app


app = create_app()
