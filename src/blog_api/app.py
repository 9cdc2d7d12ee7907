"""
Blog Posts Backend API Server
Core functionality: list, create, fetch, update and delete blog posts
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.config.settings import Settings, get_settings
from blog_api.database.connection import Database
from blog_api.services.posts_service import PostStore
from blog_api.api.routes import health, posts
from blog_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, post_store=None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Runtime configuration; read from the environment when omitted
        post_store: Ready store to serve from. When given, the caller owns its
            connection lifecycle and the lifespan does not touch the database.
    """
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        database = None
        if app.state.post_store is None:
            database = Database(settings)
            await database.connect()
            app.state.post_store = PostStore(database)
        try:
            yield
        finally:
            if database is not None:
                await database.close()
                app.state.post_store = None

    app = FastAPI(
        title="Blog Posts Backend",
        description="Backend API for listing, creating, updating and deleting blog posts",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.post_store = post_store

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(posts.router, prefix="/posts", tags=["Posts"])

    return app
