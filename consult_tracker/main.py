"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from consult_tracker.config import get_settings
from consult_tracker.infrastructure.dependencies import get_remote_config_repository
from consult_tracker.infrastructure.logging.log_config import setup_logging
from consult_tracker.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report the data repository."""
    setup_logging()

    config = get_remote_config_repository().load()
    if config is None or not config.is_complete:
        logger.warning(
            "GitHub repository is not configured; data endpoints return 428 "
            "until settings are saved via PUT /api/v1/settings/github."
        )
    else:
        logger.info("Data repository: %s/%s@%s", config.owner, config.repo, config.branch)

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "consult_tracker.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
