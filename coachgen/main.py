"""
Main FastAPI application.

Following Sandi Metz:
- Single Responsibility: Application setup and configuration
- Small methods: Each lifecycle stage isolated
- Clear naming: Descriptive function names
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from coachgen import __version__
from coachgen.api.routes import generate, health
from coachgen.config import config
from coachgen.services.generation_client import GenerationClient
from coachgen.utils.logger import get_logger, setup_logging

setup_logging(config.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Own one generation client for the application's lifetime."""
    logger.info("Starting CoachGen", env=config.app_env)
    client = GenerationClient(settings=config)
    client.start()
    app.state.generation_client = client

    yield

    logger.info("Shutting down CoachGen")
    await client.aclose()
    app.state.generation_client = None


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=config.app_name,
        description="Resilient training content generation",
        version=__version__,
        docs_url="/docs" if config.is_development else None,
        redoc_url="/redoc" if config.is_development else None,
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(generate.router, prefix="/api/v1", tags=["generate"])

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "coachgen.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.is_development,
    )
