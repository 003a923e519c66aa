"""FastAPI application entry point"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_tree.api.router import router
from content_tree.core.config import settings
from content_tree.core.errors import register_exception_handlers
from content_tree.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.STORAGE_BACKEND == "dynamodb":
        from content_tree.core.dynamodb import dynamodb_config

        dynamodb_config.initialize_models()
        if settings.CREATE_TABLES_ON_STARTUP:
            dynamodb_config.create_tables()
    logger.info(
        "%s started (%s, storage=%s)",
        settings.PROJECT_NAME, settings.ENVIRONMENT, settings.STORAGE_BACKEND,
    )
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Category and content tree management backend",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include consolidated v1 router
    app.include_router(router, prefix=settings.API_V1_STR, tags=["api-v1"])

    return app


# Create app instance
app = create_app()
