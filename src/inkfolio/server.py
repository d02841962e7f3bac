"""
Inkfolio API server.

Backend for the blog/portfolio SPA:
- Posts, projects, songs (public reads)
- Moderated friend links and a message board
- Admin authentication (single credential, 24h JWT)
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import __version__
from .api import (
    auth_router,
    friends_router,
    messages_router,
    posts_router,
    projects_router,
    songs_router,
)
from .config import Settings, settings as default_settings
from .database import create_engine_for, create_session_maker, init_db
from .log import configure_logging
from .middleware import RequestLoggingMiddleware, register_exception_handlers
from .schemas.common import HealthResponse
from .services import AuthService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    await init_db(app.state.engine)
    logger.info("Inkfolio API started")
    yield
    await app.state.engine.dispose()
    logger.info("Inkfolio API shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The store engine and auth service are built from `settings` and attached
    to `app.state`; pass a custom `Settings` to point the app at another
    database or credential.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Inkfolio API",
        description="Blog and portfolio API with admin authoring and friend-link moderation",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_engine_for(settings.DATABASE_URL)
    app.state.session_maker = create_session_maker(app.state.engine)
    app.state.auth_service = AuthService.from_settings(settings)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    # Routers define their own prefixes, mounted once under /api
    app.include_router(auth_router, prefix="/api")
    app.include_router(posts_router, prefix="/api")
    app.include_router(friends_router, prefix="/api")
    app.include_router(messages_router, prefix="/api")
    app.include_router(projects_router, prefix="/api")
    app.include_router(songs_router, prefix="/api")

    # Health check
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    @app.get("/api/health", response_model=HealthResponse, tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse()

    return app


def run(settings: Optional[Settings] = None):
    """Run the server."""
    import uvicorn

    settings = settings or default_settings
    uvicorn.run(
        "inkfolio.server:create_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    run()
